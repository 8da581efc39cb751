import streamlit as st

from arcade.catalog import GAMES_BY_KEY
from arcade.reaction import DELAY_RANGES, Phase, ReactionTimer
from utilities.app_state import mount_game, require_settings, require_sound
from utilities.charts import reaction_history_chart
from utilities.sound import render_sound_cue

META = GAMES_BY_KEY["reaction"]

settings = require_settings()
sound = require_sound()
game = mount_game(META.key, lambda: ReactionTimer(settings, sound))

st.title(f"{META.icon} {META.title}")
lo, hi = DELAY_RANGES[settings.state.difficulty]
st.caption(f"Press Start, wait for green, then click. Green shows up {lo}–{hi} ms after Start.")


@st.fragment(run_every=0.1)
def play_area():
    game.pump()
    state = game.state

    col1, col2 = st.columns(2)
    col1.metric("Best", f"{state.best} ms" if state.best is not None else "—")
    col2.metric("Last", f"{state.last} ms" if state.last is not None else "—")

    if state.phase == Phase.GO:
        st.success(f"### {state.message}")
    elif state.phase == Phase.WAITING:
        st.error(f"### {state.message}")
    else:
        st.info(f"### {state.message}")

    st.button("👆 Click", key="reaction_pad", on_click=game.click,
              type="primary" if state.phase == Phase.GO else "secondary",
              use_container_width=True)

    c1, c2 = st.columns(2)
    c1.button("Start", key="reaction_start", on_click=game.start, use_container_width=True)
    c2.button("Reset", key="reaction_reset", on_click=game.reset, use_container_width=True)

    render_sound_cue()

    fig = reaction_history_chart(state.history)
    if fig is not None:
        st.subheader("This session")
        st.plotly_chart(fig, use_container_width=True, key="reaction_history")


play_area()
