import logging
import threading
from typing import Callable, Optional

from .config import settings
from .session import GameSession

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Delivers ``tick()`` to a session from a background thread.

    The thread exits on its own once the session is over; ``stop()``
    cancels it early when the player leaves.
    """

    def __init__(
        self,
        session: GameSession,
        interval: float = settings.TICK_INTERVAL_SECONDS,
        on_tick: Optional[Callable[[GameSession], None]] = None,
    ):
        self.session = session
        self.interval = interval
        self.on_tick = on_tick
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("CountdownTimer can only be started once")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.info(f"Countdown started for {self.session.word}")

    def stop(self) -> None:
        self._stopped.set()

    def join(self, timeout: Optional[float] = None) -> None:
        # A callback that stops its own timer cannot wait for itself
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            if self._stopped.is_set() or self.session.is_over:
                break
            self.session.tick()
            if self.on_tick is not None:
                try:
                    self.on_tick(self.session)
                except Exception:
                    logger.exception(f"Tick callback failed for {self.session.word}")
            if self.session.is_over:
                break
        logger.info(f"Countdown stopped for {self.session.word}")


class ManualClock:
    """Deterministic tick driver for tests and scripted hosts."""

    def __init__(self, session: GameSession):
        self.session = session

    def advance(self, seconds: int = 1) -> int:
        delivered = 0
        for _ in range(seconds):
            if self.session.is_over:
                break
            self.session.tick()
            delivered += 1
        return delivered
