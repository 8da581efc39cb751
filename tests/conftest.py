import random

import pytest

from arcade.keyboard import KeyboardBus
from arcade.settings import Settings, SettingsStore
from arcade.sound import SoundBoard
from arcade.timers import TimerSet


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class SoundRecorder:
    def __init__(self):
        self.played = []

    def __call__(self, kind):
        self.played.append(kind.value)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timers(clock):
    return TimerSet(clock)


@pytest.fixture
def settings():
    return SettingsStore(Settings())


@pytest.fixture
def recorder():
    return SoundRecorder()


@pytest.fixture
def sound(settings, recorder):
    return SoundBoard(settings, sink=recorder)


@pytest.fixture
def keyboard():
    return KeyboardBus()


@pytest.fixture
def rng():
    return random.Random(1234)
