"""Game engines and collaborators for the mini-games dashboard."""

from arcade.settings import Difficulty, Settings, SettingsStore
from arcade.sound import Sound, SoundBoard
from arcade.timers import TimerSet

__all__ = ["Difficulty", "Settings", "SettingsStore", "Sound", "SoundBoard", "TimerSet"]
