import logging
from enum import Enum
from typing import Callable, Optional

from arcade.settings import SettingsStore

logger = logging.getLogger(__name__)


class Sound(str, Enum):
    CLICK = "click"
    SUCCESS = "success"
    ERROR = "error"


class SoundUnavailable(Exception):
    """Raised by a sink that cannot play right now (missing asset, blocked output)."""


Sink = Callable[[Sound], None]


class SoundBoard:
    """
    Fire-and-forget sound trigger.

    Consults the sound switch on every call and hands the cue to the sink, which is
    expected to restart playback rather than queue. Playback failures never reach
    the caller.
    """

    def __init__(self, settings: SettingsStore, sink: Optional[Sink] = None):
        self.settings = settings
        self.sink = sink

    def play(self, kind) -> None:
        kind = Sound(kind)
        if not self.settings.state.sound_on or self.sink is None:
            return
        try:
            self.sink(kind)
        except (SoundUnavailable, OSError) as e:
            logger.debug("sound %s not played: %s", kind.value, e)
