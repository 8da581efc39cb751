import pytest

from arcade.settings import Difficulty, SetDifficulty
from arcade.whack import (ROUND_SECONDS, SPAWN_MS, SPAWN_TIMER, TICK_TIMER, Hit, SetRoundLength,
                          Spawn, Start, Tick, WhackAMole, WhackState, reduce)


@pytest.fixture
def game(settings, sound, timers, rng):
    return WhackAMole(settings, sound, timers=timers, rng=rng)


def test_initial_state_shows_round_length(game):
    assert not game.state.running
    assert game.state.time_left == ROUND_SECONDS[Difficulty.MEDIUM]


def test_start_runs_both_timers(game, timers, recorder):
    game.start(5)
    assert game.state == WhackState(running=True, time_left=5)
    assert timers.is_active(SPAWN_TIMER)
    assert timers.is_active(TICK_TIMER)
    assert recorder.played == ["click"]


def test_start_rejects_empty_rounds(game):
    with pytest.raises(ValueError):
        game.start(0)


def test_spawn_picks_a_cell(game, clock):
    game.start(5)
    clock.advance(SPAWN_MS[Difficulty.MEDIUM])
    game.pump()
    assert game.state.active in range(9)


def test_countdown_ends_round_and_stops_timers(game, clock, timers, recorder):
    game.start(3)
    clock.advance(2000)
    game.pump()
    assert game.state.time_left == 1
    assert game.state.running

    clock.advance(1000)
    game.pump()
    assert not game.state.running
    assert game.state.time_left == 0
    assert game.state.active is None
    assert len(timers) == 0
    assert recorder.played == ["click", "success"]
    assert game.state.rounds == (0,)


def test_hit_on_target_scores(game, clock, recorder):
    game.start(10)
    clock.advance(600)
    game.pump()
    target = game.state.active

    game.hit((target + 1) % 9)
    assert game.state.score == 0
    game.hit(target)
    assert game.state.score == 1
    assert game.state.active is None
    assert recorder.played == ["click", "error", "click"]

    # Target already taken
    game.hit(target)
    assert game.state.score == 1


def test_hit_while_idle_never_scores(game, recorder):
    for i in range(9):
        game.hit(i)
    assert game.state.score == 0
    assert recorder.played == ["error"] * 9
    assert reduce(WhackState(active=3), Hit(3)).score == 0


def test_spawn_overwrites_unhit_target():
    s = reduce(WhackState(running=True, time_left=5), Spawn(2))
    s = reduce(s, Spawn(7))
    assert s.active == 7
    assert s.score == 0
    assert reduce(WhackState(), Spawn(1)).active is None


def test_end_sound_latch(game, clock, recorder):
    game.start(1)
    clock.advance(1000)
    game.pump()
    assert game.state.end_announced
    game.hit(0)
    clock.advance(10_000)
    game.pump()
    assert recorder.played.count("success") == 1

    game.start(1)
    assert not game.state.end_announced
    clock.advance(1000)
    game.pump()
    assert recorder.played.count("success") == 2
    assert len(game.state.rounds) == 2


def test_score_survives_until_next_start(game, clock):
    game.start(2)
    clock.advance(600)
    game.pump()
    game.hit(game.state.active)
    clock.advance(2000)
    game.pump()
    assert game.state.score == 1
    assert game.state.rounds == (1,)
    game.start(2)
    assert game.state.score == 0


def test_tick_after_round_is_ignored():
    done = WhackState(time_left=0)
    assert reduce(done, Tick()) is done


def test_restart_keeps_round_history():
    s = reduce(WhackState(rounds=(4, 2)), Start(15))
    assert s.rounds == (4, 2)
    assert s.running and s.score == 0


def test_difficulty_change_reschedules_spawn(game, settings, timers):
    game.start(10)
    handle = timers.handle(SPAWN_TIMER)
    tick = timers.handle(TICK_TIMER)
    settings.dispatch(SetDifficulty(Difficulty.HARD))
    assert timers.handle(SPAWN_TIMER) != handle
    assert timers.handle(TICK_TIMER) == tick
    assert game.spawn_ms == SPAWN_MS[Difficulty.HARD]


def test_difficulty_change_while_idle_schedules_nothing(game, settings, timers):
    settings.dispatch(SetDifficulty(Difficulty.EASY))
    assert len(timers) == 0


def test_teardown_cancels_everything(game, settings, clock, timers):
    game.start(10)
    game.teardown()
    assert len(timers) == 0
    assert settings.listener_count == 0
    clock.advance(5000)
    assert game.pump() == 0
    assert game.state.time_left == 10


def test_idle_countdown_follows_difficulty(game, settings):
    settings.dispatch(SetDifficulty(Difficulty.EASY))
    assert game.state.time_left == ROUND_SECONDS[Difficulty.EASY]
    settings.dispatch(SetDifficulty(Difficulty.HARD))
    assert game.state.time_left == game.round_seconds == ROUND_SECONDS[Difficulty.HARD]


def test_round_length_change_leaves_running_and_finished_rounds_alone():
    running = WhackState(running=True, time_left=7)
    assert reduce(running, SetRoundLength(20)) is running
    finished = WhackState(time_left=0, rounds=(3,))
    assert reduce(finished, SetRoundLength(20)) is finished


def test_start_after_teardown_does_nothing(game, timers, recorder):
    game.teardown()
    game.start(5)
    assert len(timers) == 0
    assert recorder.played == []
    assert not game.state.running
