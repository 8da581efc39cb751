"""
Named one-shot and periodic timers driven by an injected monotonic clock.

Nothing runs in the background: the owner calls `run_due()` (for a Streamlit page,
from a polling fragment) and every timer whose deadline has passed fires in
deadline order. A timer cleared by an earlier callback in the same run does not
fire. Each name holds at most one timer; scheduling a name cancels the old one.
"""
import itertools
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class _Timer:
    handle: int
    name: str
    due: float
    period: Optional[float]
    callback: Callable[[], None]


class TimerSet:

    def __init__(self, clock: Callable[[], float] = None):
        self._clock = clock or monotonic_ms
        self._timers: Dict[str, _Timer] = {}
        self._handles = itertools.count(1)

    def now(self) -> float:
        return self._clock()

    def set_timeout(self, name: str, delay_ms: float, callback: Callable[[], None]) -> int:
        """Schedules `callback` once, `delay_ms` from now, replacing any timer called `name`."""
        return self._schedule(name, delay_ms, None, callback)

    def set_interval(self, name: str, period_ms: float, callback: Callable[[], None]) -> int:
        """Schedules `callback` every `period_ms`, replacing any timer called `name`."""
        if period_ms <= 0:
            raise ValueError("interval period must be positive")
        return self._schedule(name, period_ms, period_ms, callback)

    def _schedule(self, name, delay_ms, period_ms, callback) -> int:
        self.clear(name)
        timer = _Timer(next(self._handles), name, self.now() + max(delay_ms, 0), period_ms, callback)
        self._timers[name] = timer
        return timer.handle

    def clear(self, name: str) -> bool:
        return self._timers.pop(name, None) is not None

    def clear_all(self) -> None:
        self._timers.clear()

    def is_active(self, name: str) -> bool:
        return name in self._timers

    def handle(self, name: str) -> Optional[int]:
        timer = self._timers.get(name)
        return timer.handle if timer else None

    def __len__(self) -> int:
        return len(self._timers)

    def run_due(self, now: float = None) -> int:
        """Fires every timer due at `now` (default: the clock) and returns how many callbacks ran."""
        now = self.now() if now is None else now
        fired = 0
        while True:
            due = [t for t in self._timers.values() if t.due <= now]
            if not due:
                return fired
            timer = min(due, key=lambda t: (t.due, t.handle))
            if timer.period is None:
                del self._timers[timer.name]
            else:
                timer.due += timer.period
            timer.callback()
            fired += 1
