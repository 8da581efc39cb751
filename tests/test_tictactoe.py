import itertools
import random

import pytest

from arcade.tictactoe import (BOT_DELAY_MS, BOT_TIMER, LINES, O, X, Play, Reset,
                              TicTacToe, TicTacToeState, bot_pick, calc_winner, is_draw, reduce)


def board(s):
    """Builds a board from a 9-character string of X, O and '.'."""
    return tuple(None if c == "." else c for c in s)


@pytest.fixture
def game(sound, timers, rng):
    return TicTacToe(sound, timers=timers, rng=rng)


# --- WIN / DRAW DETECTION ---

@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line, mark):
    cells = [None] * 9
    for i in line:
        cells[i] = mark
    assert calc_winner(cells) == mark


def test_partial_lines_do_not_win():
    for line in LINES:
        for pair in itertools.combinations(line, 2):
            cells = [None] * 9
            for i in pair:
                cells[i] = X
            assert calc_winner(cells) is None


def test_mixed_full_board_is_a_draw():
    full = board("XOXXOOOXX")
    assert calc_winner(full) is None
    assert is_draw(full)
    assert not is_draw(board("XOXXOOOX."))


def test_winner_matches_lines_on_random_playouts():
    rng = random.Random(5)
    for _game in range(200):
        cells = [None] * 9
        turn = X
        while calc_winner(cells) is None and not all(cells):
            i = rng.choice([i for i, c in enumerate(cells) if not c])
            cells[i] = turn
            turn = O if turn == X else X
        full_lines = {cells[a] for a, b, c in LINES if cells[a] and cells[a] == cells[b] == cells[c]}
        assert calc_winner(cells) == (full_lines.pop() if full_lines else None)


# --- BOT HEURISTIC ---

def test_bot_completes_its_own_line():
    assert bot_pick(board("OO.X.X...")) == 2


def test_bot_prefers_winning_over_blocking():
    # X threatens 5, O can win at 2
    assert bot_pick(board("OO.XX....")) == 2


def test_bot_takes_index_2_on_xx_start():
    assert bot_pick(board("XX.......")) == 2


def test_bot_blocks_before_taking_center():
    # No O win available, X threatens 0-3-6 at 6; centre is free
    assert bot_pick(board("X..X....O")) == 6


def test_bot_takes_center_when_nothing_is_urgent():
    assert bot_pick(board("X........")) == 4


def test_bot_picks_a_free_corner():
    b = board("...XOX...")
    for seed in range(20):
        assert bot_pick(b, random.Random(seed)) in (0, 2, 6, 8)


def test_bot_corner_choice_is_seedable():
    b = board("....X....")
    picks = [bot_pick(b, random.Random(99)) for _ in range(5)]
    assert len(set(picks)) == 1


def test_bot_falls_back_to_first_empty_edge():
    b = board("OOXXXOO.X")
    # Centre and corners taken, 7 wins for nobody
    assert bot_pick(b) == 7


def test_bot_has_no_move_on_full_board():
    assert bot_pick(board("XOXXOOOXX")) is None


# --- REDUCER ---

def test_turns_alternate_and_occupied_cells_are_rejected():
    s = reduce(TicTacToeState(), Play(0))
    assert s.board[0] == X and s.turn == O
    assert reduce(s, Play(0)) is s
    s = reduce(s, Play(4))
    assert s.board[4] == O and s.turn == X


def test_no_moves_after_game_over():
    s = TicTacToeState(board=board("XXXOO...."), turn=O)
    assert s.winner == X
    assert reduce(s, Play(8)) is s


# --- ENGINE ---

def test_human_move_then_bot_replies_after_delay(game, clock, recorder):
    game.play(0)
    assert game.state.turn == O
    assert recorder.played == ["click"]

    clock.advance(BOT_DELAY_MS - 1)
    game.pump()
    assert game.state.turn == O

    clock.advance(1)
    game.pump()
    assert game.state.board[4] == O
    assert game.state.turn == X
    assert recorder.played == ["click", "click"]


def test_play_rejections_use_error_sound(game, clock, recorder):
    game.play(0)
    game.play(1)  # bot's turn
    assert game.state.board[1] is None
    clock.advance(BOT_DELAY_MS)
    game.pump()
    game.play(0)  # occupied
    game.play(9)  # off the board
    assert recorder.played == ["click", "error", "click", "error", "error"]


def test_bot_timer_only_runs_on_os_turn(game, timers):
    assert not timers.is_active(BOT_TIMER)
    game.play(0)
    assert timers.is_active(BOT_TIMER)


def test_reset_cancels_pending_bot_move(game, clock, timers):
    game.play(0)
    game.reset()
    assert not timers.is_active(BOT_TIMER)
    clock.advance(1000)
    game.pump()
    assert game.state == TicTacToeState()


def test_end_sound_fires_once_per_game(game, clock, recorder, timers):
    game._state = TicTacToeState(board=board("XX.OO...."), turn=X)
    game.play(2)
    assert game.state.winner == X
    assert game.state.end_announced
    assert recorder.played.count("success") == 1
    assert not timers.is_active(BOT_TIMER)

    game.play(5)
    clock.advance(5000)
    game.pump()
    assert recorder.played.count("success") == 1

    game.reset()
    assert not game.state.end_announced
    game._state = TicTacToeState(board=board("XX.OO...."), turn=X)
    game.play(2)
    assert recorder.played.count("success") == 2


def test_bot_can_win(game, clock, recorder):
    game._state = TicTacToeState(board=board("OO.XX...X"), turn=X)
    game.play(7)
    clock.advance(BOT_DELAY_MS)
    game.pump()
    assert game.state.board[2] == O
    assert game.state.winner == O
    assert recorder.played[-1] == "success"


def test_reset_twice_equals_once(game):
    game.play(0)
    game.reset()
    once = game.state
    game.reset()
    assert game.state == once == TicTacToeState()
    assert reduce(reduce(once, Reset()), Reset()) == once


def test_teardown_stops_the_bot(game, clock):
    game.play(0)
    game.teardown()
    clock.advance(1000)
    game.pump()
    assert game.state.turn == O
    assert game.state.board[4] is None
