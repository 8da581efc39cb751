import streamlit as st

from arcade.catalog import filter_games
from utilities.app_state import SEARCH_KEY, require_settings

settings = require_settings().state

st.title("🕹️ Mini-Games Dashboard")
st.markdown(f"""
Four small games, each one a state machine driven by clicks, keys and timers.

Difficulty is **{settings.difficulty.value}** and sound is **{"on" if settings.sound_on else "off"}**;
both can be changed in the **sidebar** and apply to every game.
""")

query = st.session_state.get(SEARCH_KEY, "")
games = filter_games(query)

if query.strip():
    st.caption(f"{len(games)} game(s) matching “{query.strip()}”")

if not games:
    st.info("No games match your search. Clear the search box in the sidebar to see them all.")
    st.stop()

pages = st.session_state.get("pages", {})

cols = st.columns(2)
for i, game in enumerate(games):
    with cols[i % 2]:
        with st.container(border=True):
            st.markdown(f"### {game.icon} {game.title}")
            st.write(game.desc)
            st.caption(game.badge)
            if st.button("Play", key=f"play_{game.key}", type="primary"):
                st.switch_page(pages[game.key])
