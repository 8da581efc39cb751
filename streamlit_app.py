import streamlit as st

from arcade.catalog import GAMES, filter_games
from utilities.app_state import SEARCH_KEY, init_app_state, render_settings_controls, require_host

# Page config
st.set_page_config(page_title="Mini-Games Dashboard", page_icon="🕹️", layout="wide")

# Hide default multipage sidebar
st.markdown("""
<style>
    [data-testid="stSidebarNav"] {
        display: none;
    }
</style>
""", unsafe_allow_html=True)

init_app_state()

# Cache pages
if "pages" not in st.session_state:
    cache = {}
    cache["home"] = st.Page("pages/0_Home.py", title="Home", icon="🏠", default=True)
    for game in GAMES:
        cache[game.key] = st.Page(game.page, title=game.title, icon=game.icon, url_path=game.key)
    st.session_state["pages"] = cache

cache = st.session_state["pages"]

nav = st.navigation([cache["home"]] + [cache[game.key] for game in GAMES])

# Key of the game being shown, None on the home page
active_key = next(
    (game.key for game in GAMES if cache[game.key].url_path == nav.url_path),
    None,
)

# Sidebar
with st.sidebar:
    st.markdown("## Navigation 🧭")
    if st.button("🏠 Home", key="home_nav"):
        st.switch_page(cache["home"])

    st.text_input("Search games", key=SEARCH_KEY, placeholder="Search games…")

    with st.expander("🎮 Games", expanded=True):
        matches = filter_games(st.session_state.get(SEARCH_KEY, ""))
        if not matches:
            st.caption("No games match your search.")
        for game in matches:
            if st.button(
                f"{game.icon} {game.title}",
                key=f"nav_{game.key}",
                type="primary" if game.key == active_key else "secondary",
                use_container_width=True,
            ):
                st.switch_page(cache[game.key])

    st.markdown("<div style='height:4px'></div>", unsafe_allow_html=True)
    render_settings_controls()

# Leaving a game tears it down before the next page mounts its own
require_host().sync(active_key)

nav.run()
