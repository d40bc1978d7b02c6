"""Fixed-period tick driver for a GameEngine."""

import logging

from .constants import TICK_MS

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Fires ``engine.tick()`` every ``period_ms`` of elapsed time.

    The scheduler is armed only while the engine's state can tick. As soon as
    that stops being true, or the engine is reset, it cancels, discarding any
    accumulated time, and a later restart waits a full period before the first tick.
    """

    def __init__(self, engine, period_ms=TICK_MS):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self.engine = engine
        self.period_ms = period_ms
        self._elapsed_ms = 0
        self._running = False
        self._session = engine.session

    @property
    def running(self):
        return self._running

    def _sync(self):
        session = self.engine.session
        if session != self._session:
            # A reset happened since the last call, so the old game's time is void.
            self._session = session
            self._running = False
            self._elapsed_ms = 0

        can_tick = self.engine.get_state().can_tick
        if can_tick and not self._running:
            self._running = True
            self._elapsed_ms = 0
            logger.debug("Tick scheduler started (%d ms)", self.period_ms)
        elif not can_tick and self._running:
            self._running = False
            self._elapsed_ms = 0
            logger.debug("Tick scheduler cancelled")
        return can_tick

    def advance(self, elapsed_ms):
        """Account for ``elapsed_ms`` of wall time; return the number of ticks fired."""
        if not self._sync():
            return 0

        self._elapsed_ms += max(0, elapsed_ms)
        fired = 0
        while self._elapsed_ms >= self.period_ms:
            self._elapsed_ms -= self.period_ms
            self.engine.tick()
            fired += 1
            if not self._sync():
                break
        return fired
