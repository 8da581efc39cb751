import streamlit as st

from arcade.catalog import GAMES_BY_KEY
from arcade.tictactoe import X, TicTacToe
from utilities.app_state import mount_game, require_sound
from utilities.sound import render_sound_cue

META = GAMES_BY_KEY["tictactoe"]

sound = require_sound()
game = mount_game(META.key, lambda: TicTacToe(sound))

st.title(f"{META.icon} {META.title}")
st.caption("You are X, the bot is O.")


@st.fragment(run_every=0.1)
def board():
    game.pump()
    state = game.state

    if state.winner:
        st.success(f"Winner: **{state.winner}**")
    elif state.draw:
        st.info("Draw!")
    elif state.turn == X:
        st.write(f"Turn: **{state.turn}** (your move)")
    else:
        st.write(f"Turn: **{state.turn}** (bot thinking…)")

    locked = state.game_over or state.turn != X
    for row in range(3):
        cols = st.columns(3)
        for col in range(3):
            i = row * 3 + col
            cols[col].button(
                state.board[i] or "·",
                key=f"ttt_{i}",
                on_click=game.play,
                args=(i,),
                disabled=locked,
                use_container_width=True,
            )

    st.button("Reset", key="ttt_reset", on_click=game.reset)
    render_sound_cue()


board()
