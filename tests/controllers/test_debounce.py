"""Tests for the search debouncer."""

from __future__ import annotations

from collections.abc import Callable

from folioctl.controllers.debounce import Debouncer


class ManualTimer:
    """Timer that only fires when the test says so."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.callback()


class TimerLog:
    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer


class TestDebouncer:
    def test_delay_in_seconds(self) -> None:
        log = TimerLog()
        Debouncer(150, lambda: None, timer_factory=log)()
        assert log.timers[0].delay == 0.15
        assert log.timers[0].started

    def test_only_last_call_runs(self) -> None:
        calls: list[str] = []
        log = TimerLog()
        debounced = Debouncer(150, calls.append, timer_factory=log)
        debounced("s")
        debounced("ss")
        debounced("sso")
        assert [t.cancelled for t in log.timers] == [True, True, False]
        for timer in log.timers:
            timer.fire()
        assert calls == ["sso"]
        assert not debounced.pending

    def test_at_most_one_pending(self) -> None:
        log = TimerLog()
        debounced = Debouncer(150, lambda _: None, timer_factory=log)
        debounced("a")
        debounced("b")
        assert debounced.pending
        assert sum(not t.cancelled for t in log.timers) == 1

    def test_flush_runs_now(self) -> None:
        calls: list[str] = []
        log = TimerLog()
        debounced = Debouncer(150, calls.append, timer_factory=log)
        debounced("billing")
        assert debounced.flush() is True
        assert calls == ["billing"]
        assert log.timers[0].cancelled
        assert debounced.flush() is False

    def test_cancel_drops_pending(self) -> None:
        calls: list[str] = []
        log = TimerLog()
        debounced = Debouncer(150, calls.append, timer_factory=log)
        debounced("x")
        debounced.cancel()
        log.timers[0].callback()
        assert calls == []
        assert not debounced.pending

    def test_default_timer_fires(self) -> None:
        import threading

        done = threading.Event()
        debounced = Debouncer(1, done.set)
        debounced()
        assert done.wait(2)
