import streamlit as st

from arcade.catalog import GAMES_BY_KEY
from arcade.whack import WhackAMole
from utilities.app_state import mount_game, require_settings, require_sound
from utilities.charts import round_scores_chart
from utilities.sound import render_sound_cue

META = GAMES_BY_KEY["whack"]

settings = require_settings()
sound = require_sound()
game = mount_game(META.key, lambda: WhackAMole(settings, sound))

st.title(f"{META.icon} {META.title}")
st.caption(f"{game.round_seconds} s rounds, a new mole every {game.spawn_ms} ms.")


@st.fragment(run_every=0.1)
def field():
    game.pump()
    state = game.state

    col1, col2 = st.columns(2)
    col1.metric("Score", state.score)
    col2.metric("Time", f"{state.time_left}s")

    st.button("Running…" if state.running else "Start", key="whack_start",
              on_click=game.start, disabled=state.running)

    for row in range(3):
        cols = st.columns(3)
        for col in range(3):
            i = row * 3 + col
            cols[col].button(
                "🐹" if i == state.active else "·",
                key=f"whack_{i}",
                on_click=game.hit,
                args=(i,),
                type="primary" if i == state.active else "secondary",
                use_container_width=True,
            )

    render_sound_cue()

    fig = round_scores_chart(state.rounds)
    if fig is not None:
        st.subheader("Rounds this session")
        st.plotly_chart(fig, use_container_width=True, key="whack_rounds")


field()
