"""
Whack-a-mole: hit the lit cell before the next one spawns.

Two periodic timers run while a round is on: `spawn` moves the target and `tick`
counts the round down one second at a time.
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from arcade.engine import Engine
from arcade.rng import rand_int
from arcade.settings import Difficulty, SettingsStore
from arcade.sound import Sound, SoundBoard

CELLS = 9
TICK_MS = 1000
SPAWN_MS = {
    Difficulty.EASY: 700,
    Difficulty.MEDIUM: 600,
    Difficulty.HARD: 450,
}
ROUND_SECONDS = {
    Difficulty.EASY: 20,
    Difficulty.MEDIUM: 15,
    Difficulty.HARD: 12,
}
HISTORY_SIZE = 20
SPAWN_TIMER = "spawn"
TICK_TIMER = "tick"


@dataclass(frozen=True)
class WhackState:
    running: bool = False
    score: int = 0
    time_left: int = 0
    active: Optional[int] = None
    end_announced: bool = False
    rounds: Tuple[int, ...] = ()

    @property
    def round_over(self) -> bool:
        return not self.running and self.time_left == 0


# --- EVENTS ---

@dataclass(frozen=True)
class Start:
    duration: int


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Spawn:
    index: int


@dataclass(frozen=True)
class Hit:
    index: int


@dataclass(frozen=True)
class SetRoundLength:
    seconds: int


@dataclass(frozen=True)
class AnnounceEnd:
    pass


def reduce(state: WhackState, event) -> WhackState:
    if isinstance(event, Start):
        return WhackState(running=True, time_left=event.duration, rounds=state.rounds)
    if isinstance(event, Tick):
        if not state.running:
            return state
        left = state.time_left - 1
        if left <= 0:
            rounds = (state.rounds + (state.score,))[-HISTORY_SIZE:]
            return replace(state, running=False, time_left=0, active=None, rounds=rounds)
        return replace(state, time_left=left)
    if isinstance(event, Spawn):
        return replace(state, active=event.index) if state.running else state
    if isinstance(event, Hit):
        if not state.running or state.active is None or event.index != state.active:
            return state
        return replace(state, score=state.score + 1, active=None)
    if isinstance(event, SetRoundLength):
        # Only the countdown shown before the first round follows the difficulty
        if state.running or state.time_left == 0:
            return state
        return replace(state, time_left=event.seconds)
    if isinstance(event, AnnounceEnd):
        return replace(state, end_announced=True)
    return state


class WhackAMole(Engine):
    reducer = reduce

    def __init__(self, settings: SettingsStore, sound: SoundBoard, timers=None, rng=None):
        super().__init__(WhackState(time_left=ROUND_SECONDS[settings.state.difficulty]), timers)
        self.settings = settings
        self.sound = sound
        self.rng = rng
        self._unsubscribe = settings.subscribe(self._on_settings)

    @property
    def spawn_ms(self) -> int:
        return SPAWN_MS[self.settings.state.difficulty]

    @property
    def round_seconds(self) -> int:
        return ROUND_SECONDS[self.settings.state.difficulty]

    def start(self, duration: int = None):
        if not self.mounted:
            return
        duration = self.round_seconds if duration is None else duration
        if duration < 1:
            raise ValueError("a round lasts at least one second")
        self.sound.play(Sound.CLICK)
        self.dispatch(Start(duration))
        self.timers.set_interval(SPAWN_TIMER, self.spawn_ms, self._on_spawn)
        self.timers.set_interval(TICK_TIMER, TICK_MS, self._on_tick)

    def hit(self, i: int):
        state = self.state
        if state.running and state.active is not None and i == state.active:
            self.sound.play(Sound.CLICK)
            self.dispatch(Hit(i))
        else:
            self.sound.play(Sound.ERROR)

    def _on_spawn(self):
        self.dispatch(Spawn(rand_int(0, CELLS - 1, self.rng)))

    def _on_tick(self):
        self.dispatch(Tick())

    def _on_settings(self, new, old):
        if new.difficulty == old.difficulty:
            return
        if self.state.running:
            self.timers.set_interval(SPAWN_TIMER, self.spawn_ms, self._on_spawn)
        else:
            self.dispatch(SetRoundLength(self.round_seconds))

    def after_transition(self, previous, current):
        if not current.running:
            self.timers.clear(SPAWN_TIMER)
            self.timers.clear(TICK_TIMER)
        if current.round_over and not current.end_announced:
            self.sound.play(Sound.SUCCESS)
            self.dispatch(AnnounceEnd())

    def teardown(self):
        self._unsubscribe()
        super().teardown()
