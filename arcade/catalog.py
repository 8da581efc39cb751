from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class GameMeta:
    key: str
    title: str
    desc: str
    badge: str
    icon: str
    page: str

    @property
    def search_text(self) -> str:
        return f"{self.title} {self.desc} {self.badge}".lower()


GAMES = [
    GameMeta("reaction", "Reaction Timer", "Click when it turns green", "timer + reducer", "⚡",
             "pages/1_Reaction_Timer.py"),
    GameMeta("tictactoe", "Tic-Tac-Toe", "Classic 3×3 strategy", "bot + reducer", "⭕",
             "pages/2_Tic_Tac_Toe.py"),
    GameMeta("whack", "Whack-a-Mole", "Hit the mole fast", "interval loop + reducer", "🎯",
             "pages/3_Whack_a_Mole.py"),
    GameMeta("sequence", "Key Sequence", "Type the target string", "keyboard buffer", "🔤",
             "pages/4_Key_Sequence.py"),
]

GAMES_BY_KEY = {g.key: g for g in GAMES}


def filter_games(query: str, games: Iterable[GameMeta] = GAMES) -> List[GameMeta]:
    """Case-insensitive substring search over title, description and badge. A blank query matches all."""
    q = (query or "").strip().lower()
    if not q:
        return list(games)
    return [g for g in games if q in g.search_text]
