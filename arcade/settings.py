"""
Dashboard settings shared by every game: difficulty and the sound switch.

Settings are immutable snapshots. The store owns the current snapshot, applies
actions through `reduce_settings` and tells subscribers about every change.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value, default=None):
        """Maps a raw string (query param, widget value) to a Difficulty, or the default."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default if default is not None else cls.MEDIUM


DIFFICULTIES = [d for d in Difficulty]


@dataclass(frozen=True)
class Settings:
    difficulty: Difficulty = Difficulty.MEDIUM
    sound_on: bool = True


# --- ACTIONS ---

@dataclass(frozen=True)
class SetDifficulty:
    value: Difficulty


@dataclass(frozen=True)
class ToggleSound:
    pass


@dataclass(frozen=True)
class SetSound:
    value: bool


def reduce_settings(state: Settings, action) -> Settings:
    if isinstance(action, SetDifficulty):
        return replace(state, difficulty=Difficulty(action.value))
    if isinstance(action, ToggleSound):
        return replace(state, sound_on=not state.sound_on)
    if isinstance(action, SetSound):
        return replace(state, sound_on=bool(action.value))
    return state


Listener = Callable[[Settings, Settings], None]


class SettingsStore:
    """Holds the current Settings and notifies listeners with (new, old) after each change."""

    def __init__(self, initial: Settings = None):
        self._state = initial if initial is not None else Settings()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> Settings:
        return self._state

    def dispatch(self, action) -> Settings:
        old = self._state
        new = reduce_settings(old, action)
        if new == old:
            return old
        self._state = new
        logger.debug("settings changed: %s -> %s", old, new)
        # Copy: a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            listener(new, old)
        return new

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a change listener and returns the function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
