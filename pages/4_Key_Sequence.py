import streamlit as st

from arcade.catalog import GAMES_BY_KEY
from arcade.sequence import BACKSPACE, MAX_TYPED, KeySequence, Status
from utilities.app_state import mount_game, require_keyboard, require_settings, require_sound
from utilities.sound import render_sound_cue

META = GAMES_BY_KEY["sequence"]

settings = require_settings()
sound = require_sound()
keyboard = require_keyboard()
game = mount_game(META.key, lambda: KeySequence(settings, sound, keyboard))


def _on_type():
    """Feeds the typed characters to the keyboard as individual key presses."""
    keyboard.type_text(st.session_state.get("_sequence_input", ""))
    st.session_state["_sequence_input"] = ""


st.title(f"{META.icon} {META.title}")
st.metric("Score", game.state.score)

state = game.state
with st.container(border=True):
    st.caption("Type exactly:")
    st.markdown(f"## `{state.target}`")
    st.caption("You typed:")
    st.markdown(f"### `{state.typed}`" if state.typed else "### —")
    st.write(f"Progress: {game.progress} {'✅' if state.status == Status.WIN else ''}")

st.text_input(
    "Keys",
    key="_sequence_input",
    on_change=_on_type,
    placeholder="type letters and press Enter",
    max_chars=MAX_TYPED,
)

c1, c2, c3 = st.columns(3)
c1.button("⌫ Backspace", on_click=keyboard.press, args=(BACKSPACE,), use_container_width=True)
c2.button("Clear", on_click=game.clear, use_container_width=True)
c3.button("Next", on_click=game.next, use_container_width=True)

render_sound_cue()
