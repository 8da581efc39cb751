"""
Tic-tac-toe against a heuristic bot.

Board representation: tuple of 9 cells, each None, "X" or "O", row-major.
The human plays X and moves first; the bot plays O.
"""
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from arcade.engine import Engine
from arcade.rng import rand_int
from arcade.sound import Sound, SoundBoard

X = "X"
O = "O"
BOT_DELAY_MS = 350
BOT_TIMER = "bot"

# Winning lines (rows, columns, diagonals)
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
CENTER = 4
CORNERS = (0, 2, 6, 8)
EMPTY_BOARD = (None,) * 9

Board = Tuple[Optional[str], ...]


def calc_winner(board: Sequence[Optional[str]]) -> Optional[str]:
    """Returns the mark that fills a whole line, or None."""
    for a, b, c in LINES:
        mark = board[a]
        if mark and mark == board[b] == board[c]:
            return mark
    return None


def is_draw(board: Sequence[Optional[str]]) -> bool:
    return calc_winner(board) is None and all(board)


def empty_cells(board: Sequence[Optional[str]]):
    return [i for i, cell in enumerate(board) if not cell]


def _wins_with(board, i, mark) -> bool:
    trial = list(board)
    trial[i] = mark
    return calc_winner(trial) == mark


def bot_pick(board: Sequence[Optional[str]], rng=None) -> Optional[int]:
    """
    Picks O's move by fixed priority over the empty cells in index order:
    win, block X, centre, random empty corner, first empty cell.
    Returns None when the board is full.
    """
    empty = empty_cells(board)
    for i in empty:
        if _wins_with(board, i, O):
            return i
    for i in empty:
        if _wins_with(board, i, X):
            return i
    if not board[CENTER]:
        return CENTER
    corners = [i for i in CORNERS if not board[i]]
    if corners:
        return corners[rand_int(0, len(corners) - 1, rng)]
    return empty[0] if empty else None


@dataclass(frozen=True)
class TicTacToeState:
    board: Board = EMPTY_BOARD
    turn: str = X
    end_announced: bool = False

    @property
    def winner(self) -> Optional[str]:
        return calc_winner(self.board)

    @property
    def draw(self) -> bool:
        return is_draw(self.board)

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.draw


# --- EVENTS ---

@dataclass(frozen=True)
class Play:
    index: int


@dataclass(frozen=True)
class AnnounceEnd:
    pass


@dataclass(frozen=True)
class Reset:
    pass


def reduce(state: TicTacToeState, event) -> TicTacToeState:
    if isinstance(event, Play):
        if state.game_over or not 0 <= event.index < 9 or state.board[event.index]:
            return state
        board = list(state.board)
        board[event.index] = state.turn
        return replace(state, board=tuple(board), turn=O if state.turn == X else X)
    if isinstance(event, AnnounceEnd):
        return replace(state, end_announced=True)
    if isinstance(event, Reset):
        return TicTacToeState()
    return state


class TicTacToe(Engine):
    reducer = reduce

    def __init__(self, sound: SoundBoard, timers=None, rng=None, bot_delay_ms: float = BOT_DELAY_MS):
        super().__init__(TicTacToeState(), timers)
        self.sound = sound
        self.rng = rng
        self.bot_delay_ms = bot_delay_ms

    def can_play(self, i: int) -> bool:
        state = self.state
        return (not state.game_over and state.turn == X
                and 0 <= i < 9 and not state.board[i])

    def play(self, i: int):
        if not self.can_play(i):
            self.sound.play(Sound.ERROR)
            return
        self.sound.play(Sound.CLICK)
        self.dispatch(Play(i))

    def reset(self):
        self.sound.play(Sound.CLICK)
        self.dispatch(Reset())

    def after_transition(self, previous, current):
        if current.game_over and not current.end_announced:
            self.sound.play(Sound.SUCCESS)
            self.dispatch(AnnounceEnd())
            return
        # The bot timer always belongs to the current board.
        self.timers.clear(BOT_TIMER)
        if not current.game_over and current.turn == O:
            self.timers.set_timeout(BOT_TIMER, self.bot_delay_ms, self._bot_move)

    def _bot_move(self):
        i = bot_pick(self.state.board, self.rng)
        if i is not None:
            self.sound.play(Sound.CLICK)
            self.dispatch(Play(i))
