"""
Reaction timer: wait for green, then click as fast as possible.

Phases: idle -> waiting -> go -> done, and back to waiting on restart.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from arcade.engine import Engine
from arcade.rng import rand_int
from arcade.settings import Difficulty, SettingsStore
from arcade.sound import Sound, SoundBoard

DELAY_RANGES = {
    Difficulty.EASY: (700, 1400),
    Difficulty.MEDIUM: (800, 2200),
    Difficulty.HARD: (900, 2600),
}
HISTORY_SIZE = 20
GO_TIMER = "go"


class Phase(str, Enum):
    IDLE = "idle"
    WAITING = "waiting"
    GO = "go"
    DONE = "done"


@dataclass(frozen=True)
class ReactionState:
    phase: Phase = Phase.IDLE
    message: str = "Press Start"
    best: Optional[int] = None
    last: Optional[int] = None
    history: Tuple[int, ...] = ()


# --- EVENTS ---

@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Go:
    pass


@dataclass(frozen=True)
class TooSoon:
    pass


@dataclass(frozen=True)
class Finish:
    ms: int


@dataclass(frozen=True)
class Reset:
    pass


def reduce(state: ReactionState, event) -> ReactionState:
    if isinstance(event, Start):
        return replace(state, phase=Phase.WAITING, message="Wait for GREEN...", last=None)
    if isinstance(event, Go):
        if state.phase != Phase.WAITING:
            return state
        return replace(state, phase=Phase.GO, message="GO! Click now!")
    if isinstance(event, TooSoon):
        if state.phase != Phase.WAITING:
            return state
        return replace(state, phase=Phase.DONE, message="Too soon! Try again.", last=None)
    if isinstance(event, Finish):
        if state.phase != Phase.GO:
            return state
        best = event.ms if state.best is None else min(state.best, event.ms)
        history = (state.history + (event.ms,))[-HISTORY_SIZE:]
        return replace(state, phase=Phase.DONE, message=f"Your time: {event.ms} ms",
                       last=event.ms, best=best, history=history)
    if isinstance(event, Reset):
        return ReactionState(best=state.best, history=state.history)
    return state


class ReactionTimer(Engine):
    reducer = reduce

    def __init__(self, settings: SettingsStore, sound: SoundBoard, timers=None, rng=None):
        super().__init__(ReactionState(), timers)
        self.settings = settings
        self.sound = sound
        self.rng = rng
        self._go_at = 0.0

    def delay_range(self):
        return DELAY_RANGES[self.settings.state.difficulty]

    def start(self):
        if not self.mounted:
            return
        self.sound.play(Sound.CLICK)
        self.dispatch(Start())
        lo, hi = self.delay_range()
        self.timers.set_timeout(GO_TIMER, rand_int(lo, hi, self.rng), self._on_go)

    def _on_go(self):
        self._go_at = self.timers.now()
        self.dispatch(Go())

    def click(self):
        phase = self.state.phase
        if phase == Phase.WAITING:
            self.sound.play(Sound.ERROR)
            self.timers.clear(GO_TIMER)
            self.dispatch(TooSoon())
        elif phase == Phase.GO:
            self.sound.play(Sound.SUCCESS)
            elapsed = self.timers.now() - self._go_at
            self.dispatch(Finish(int(elapsed + 0.5)))
        else:
            self.sound.play(Sound.CLICK)

    def reset(self):
        self.sound.play(Sound.CLICK)
        self.timers.clear(GO_TIMER)
        self.dispatch(Reset())
