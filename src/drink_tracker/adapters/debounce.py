"""Coalesce bursts of calls into a single delayed action."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

_logger = logging.getLogger(__name__)


@dataclass
class Debouncer:
    """Run ``action`` once calls to ``trigger`` stop for ``delay_seconds``.

    A non-positive delay runs the action synchronously on every trigger.
    """

    action: Callable[[], None]
    delay_seconds: float = 0.5
    _timer: threading.Timer | None = field(default=None, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def trigger(self) -> None:
        """Restart the delay; the action runs when it elapses."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            if self.delay_seconds > 0:
                self._timer = threading.Timer(
                    self.delay_seconds, self._fire, args=(self._generation,)
                )
                self._timer.daemon = True
                self._timer.start()
                return
        self.action()

    def flush(self) -> None:
        """Run a pending action now."""
        with self._lock:
            timer = self._timer
            self._timer = None
            self._generation += 1
        if timer is None:
            return
        timer.cancel()
        self.action()

    def cancel(self) -> None:
        """Drop a pending action without running it."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
        try:
            self.action()
        except Exception:
            _logger.exception("Debounced action failed")
