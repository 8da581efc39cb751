"""
Key sequence: type the target word exactly.

Keys arrive through a KeyboardBus listener that exists only while the game is
mounted. The listener is replaced on every new target so a single one is ever
attached.
"""
import string
from dataclasses import dataclass, replace
from enum import Enum

from arcade.engine import Engine
from arcade.keyboard import KeyboardBus
from arcade.rng import rand_int
from arcade.settings import Difficulty, SettingsStore
from arcade.sound import Sound, SoundBoard

MAX_TYPED = 24
BACKSPACE = "Backspace"
WORD_POOLS = {
    Difficulty.EASY: ("asd", "jkl", "qwe", "zxc"),
    Difficulty.MEDIUM: ("react", "hooks", "types", "props", "state"),
    Difficulty.HARD: ("usecallback", "usememo", "reducer", "deferred"),
}


class Status(str, Enum):
    TYPING = "typing"
    WIN = "win"


def make_target(difficulty: Difficulty, rng=None) -> str:
    pool = WORD_POOLS[Difficulty(difficulty)]
    return pool[rand_int(0, len(pool) - 1, rng)]


def apply_key(typed: str, key: str) -> str:
    """Returns the buffer after `key`; keys that are not Backspace or a single letter leave it as is."""
    if key == BACKSPACE:
        return typed[:-1]
    if len(key) != 1:
        return typed
    ch = key.lower()
    if ch not in string.ascii_lowercase:
        return typed
    return (typed + ch)[:MAX_TYPED]


def prefix_match(typed: str, target: str) -> int:
    matched = 0
    for a, b in zip(typed, target):
        if a != b:
            break
        matched += 1
    return matched


@dataclass(frozen=True)
class SequenceState:
    target: str
    typed: str = ""
    score: int = 0
    status: Status = Status.TYPING

    @property
    def progress(self) -> str:
        return f"{prefix_match(self.typed, self.target)}/{len(self.target)}"


# --- EVENTS ---

@dataclass(frozen=True)
class NewTarget:
    value: str


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Clear:
    pass


def reduce(state: SequenceState, event) -> SequenceState:
    if isinstance(event, NewTarget):
        return replace(state, target=event.value, typed="", status=Status.TYPING)
    if isinstance(event, KeyPress):
        if state.status == Status.WIN:
            return state
        typed = apply_key(state.typed, event.key)
        if typed == state.typed:
            return state
        if typed == state.target:
            return replace(state, typed=typed, status=Status.WIN, score=state.score + 1)
        return replace(state, typed=typed)
    if isinstance(event, Clear):
        return replace(state, typed="", status=Status.TYPING)
    return state


class KeySequence(Engine):
    reducer = reduce

    def __init__(self, settings: SettingsStore, sound: SoundBoard, keyboard: KeyboardBus,
                 timers=None, rng=None):
        super().__init__(SequenceState(target=make_target(settings.state.difficulty, rng)), timers)
        self.settings = settings
        self.sound = sound
        self.keyboard = keyboard
        self.rng = rng
        self._detach_keys = keyboard.attach(self.on_key)
        self._unsubscribe = settings.subscribe(self._on_settings)

    @property
    def progress(self) -> str:
        return self.state.progress

    def on_key(self, key: str):
        self.dispatch(KeyPress(key))

    def next(self):
        if not self.mounted:
            return
        self._detach_keys()
        self.dispatch(NewTarget(make_target(self.settings.state.difficulty, self.rng)))
        self._detach_keys = self.keyboard.attach(self.on_key)

    def clear(self):
        self.dispatch(Clear())

    def _on_settings(self, new, old):
        if new.difficulty != old.difficulty:
            self.next()

    def after_transition(self, previous, current):
        if current.status == Status.WIN and previous.status != Status.WIN:
            self.sound.play(Sound.SUCCESS)

    def teardown(self):
        self._detach_keys()
        self._unsubscribe()
        super().teardown()
