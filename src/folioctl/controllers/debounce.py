"""Debouncer — defer a call until input has been quiet for a fixed delay.

Each new call cancels the pending one, so at most one run is ever pending.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def thread_timer(delay: float, callback: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class Debouncer:
    """Trailing-edge debounce around *callback*.

    Args:
        delay_ms: Quiet period before the call fires.
        callback: The function to run.
        timer_factory: Builds a startable, cancellable timer. Defaults to
            a daemon :class:`threading.Timer`; tests inject a manual one.
    """

    def __init__(
        self,
        delay_ms: int,
        callback: Callable[..., Any],
        *,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        self._delay = delay_ms / 1000
        self._callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Debounced call rescheduled")
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(self._delay, self._fire)
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def flush(self) -> bool:
        """Run the pending call now. Returns False if nothing was pending."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
        return self._fire()

    def _fire(self) -> bool:
        with self._lock:
            pending, self._pending = self._pending, None
            self._timer = None
        if pending is None:
            return False
        args, kwargs = pending
        self._callback(*args, **kwargs)
        return True
