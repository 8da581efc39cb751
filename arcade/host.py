import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class GameHost:
    """
    Keeps at most one mounted game engine.

    Mounting a different game tears the current one down first, so its timers,
    key listeners and settings subscriptions are gone before the new one starts.
    """

    def __init__(self):
        self.active_key: Optional[str] = None
        self.engine = None

    def mount(self, key: str, factory: Callable[[], object]):
        if self.active_key == key and self.engine is not None:
            return self.engine
        self.unmount()
        self.engine = factory()
        self.active_key = key
        logger.debug("mounted %s", key)
        return self.engine

    def unmount(self) -> None:
        if self.engine is not None:
            logger.debug("unmounting %s", self.active_key)
            self.engine.teardown()
        self.engine = None
        self.active_key = None

    def sync(self, key: Optional[str]) -> None:
        """Tears the mounted game down unless it is the one being shown."""
        if key != self.active_key:
            self.unmount()
