import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

KeyListener = Callable[[str], None]


class KeyboardBus:
    """Page-wide keydown dispatcher. Listeners receive key names such as "a" or "Backspace"."""

    def __init__(self):
        self._listeners: List[KeyListener] = []

    def attach(self, listener: KeyListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.detach(listener)

    def detach(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def press(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)

    def type_text(self, text: str) -> None:
        """Presses every character of `text` in order."""
        for ch in text:
            self.press(ch)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
