import streamlit as st

from arcade.errors import ContextError
from arcade.host import GameHost
from arcade.keyboard import KeyboardBus
from arcade.settings import DIFFICULTIES, Difficulty, SetDifficulty, SetSound, Settings, SettingsStore
from arcade.sound import SoundBoard
from utilities.sound import StreamlitSoundSink

# Session state keys for the shared collaborators
SETTINGS_KEY = "settings_store"
SOUND_KEY = "sound_board"
HOST_KEY = "game_host"
KEYBOARD_KEY = "keyboard_bus"
SEARCH_KEY = "_search"

DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def init_app_state():
    """Creates the settings store, sound board, game host and keyboard bus once per browser session."""
    if SETTINGS_KEY in st.session_state:
        return

    # Deep link: ?difficulty=hard
    difficulty = Difficulty.parse(st.query_params.get("difficulty"), DEFAULT_DIFFICULTY)
    store = SettingsStore(Settings(difficulty=difficulty))

    st.session_state[SETTINGS_KEY] = store
    st.session_state[SOUND_KEY] = SoundBoard(store, sink=StreamlitSoundSink())
    st.session_state[HOST_KEY] = GameHost()
    st.session_state[KEYBOARD_KEY] = KeyboardBus()


def _require(key, what):
    value = st.session_state.get(key)
    if value is None:
        raise ContextError(
            f"{what} is only available inside the dashboard. "
            "Start the app with `streamlit run streamlit_app.py`."
        )
    return value


def require_settings() -> SettingsStore:
    return _require(SETTINGS_KEY, "Settings")


def require_sound() -> SoundBoard:
    return _require(SOUND_KEY, "Sound")


def require_host() -> GameHost:
    return _require(HOST_KEY, "The game host")


def require_keyboard() -> KeyboardBus:
    return _require(KEYBOARD_KEY, "The keyboard")


def mount_game(key, factory):
    """Mounts the engine for this page, tearing down whichever game was mounted before."""
    return require_host().mount(key, factory)


def _sync_widgets_to_state():
    """Callback function to sync the settings widgets to the settings store."""
    store = require_settings()

    # Deselecting the active pill yields None: keep the current difficulty
    selected = st.session_state.get("_difficulty_selector")
    if selected:
        store.dispatch(SetDifficulty(Difficulty.parse(selected, store.state.difficulty)))
    else:
        st.session_state["_difficulty_selector"] = store.state.difficulty.value

    store.dispatch(SetSound(st.session_state.get("_sound_toggle", store.state.sound_on)))

    st.query_params.update(difficulty=store.state.difficulty.value)


def render_settings_controls():
    """Renders the difficulty and sound controls in the sidebar."""
    store = require_settings()

    st.markdown("## Settings ⚙️")

    st.session_state.setdefault("_difficulty_selector", store.state.difficulty.value)
    st.session_state.setdefault("_sound_toggle", store.state.sound_on)

    st.pills(
        "Difficulty",
        options=[d.value for d in DIFFICULTIES],
        selection_mode="single",
        key="_difficulty_selector",
        on_change=_sync_widgets_to_state,
    )
    st.toggle(
        "🔊 Sound",
        key="_sound_toggle",
        on_change=_sync_widgets_to_state,
    )
