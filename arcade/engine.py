import logging

from arcade.timers import TimerSet

logger = logging.getLogger(__name__)


class Engine:
    """
    Orchestration shell around a pure reducer.

    Subclasses set `reducer` and an initial state, and override `after_transition`
    for side effects (sounds, timer scheduling). Every input, user or timer, goes
    through `dispatch`.
    """

    reducer = None

    def __init__(self, initial_state, timers: TimerSet = None):
        self._state = initial_state
        self.timers = timers if timers is not None else TimerSet()
        self.mounted = True

    @property
    def state(self):
        return self._state

    def dispatch(self, event):
        if not self.mounted:
            logger.debug("%s: dropped %r after teardown", type(self).__name__, event)
            return self._state
        previous = self._state
        self._state = type(self).reducer(previous, event)
        self.after_transition(previous, self._state)
        return self._state

    def after_transition(self, previous, current):
        pass

    def pump(self) -> int:
        """Fires due timers. Returns the number of callbacks that ran."""
        if not self.mounted:
            return 0
        return self.timers.run_due()

    def teardown(self) -> None:
        self.timers.clear_all()
        self.mounted = False
        logger.debug("%s torn down", type(self).__name__)
