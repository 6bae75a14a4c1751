import itertools
import logging

from config import GAME_SPEED

logger = logging.getLogger(__name__)

_handles = itertools.count(1)


class TickDriver:
    """Fixed-period scheduler for ``GameEngine.tick``.

    Polled from the main loop with the frame time, so ticks run on the same
    thread as every other engine call. At most one tick fires per ``update``;
    time left over beyond one period is dropped rather than replayed, which
    keeps ticks from stacking after a slow frame.
    """

    def __init__(self, engine, interval_ms=GAME_SPEED):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.engine = engine
        self.interval_ms = interval_ms
        self.handle = None
        self.elapsed_ms = 0.0

    @property
    def active(self):
        return self.handle is not None

    def start(self):
        """Arm the driver; a running handle is kept as is."""
        if self.handle is None:
            self.handle = next(_handles)
            self.elapsed_ms = 0.0
            logger.debug("Tick driver %d armed (%d ms)", self.handle, self.interval_ms)
        return self.handle

    def cancel(self):
        if self.handle is not None:
            logger.debug("Tick driver %d cancelled", self.handle)
        self.handle = None
        self.elapsed_ms = 0.0

    def restart(self):
        """Replace the current handle with a fresh one."""
        self.cancel()
        return self.start()

    def update(self, elapsed_ms):
        """Account for ``elapsed_ms`` of wall time and tick if a period has passed.

        Returns the engine's TickResult, or None when nothing fired.
        """
        if self.handle is None:
            return None
        if not self.engine.is_playing or self.engine.is_game_over:
            self.elapsed_ms = 0.0
            return None

        self.elapsed_ms += elapsed_ms
        if self.elapsed_ms < self.interval_ms:
            return None
        self.elapsed_ms = min(self.elapsed_ms - self.interval_ms, self.interval_ms - 1)
        return self.engine.tick()
