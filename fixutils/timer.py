"""An inactivity timer that can be refreshed and closed."""

from __future__ import annotations

import threading
import time

FREQUENCY = 10
MIN_CHECK_INTERVAL = 1e-6


class TimerError(ValueError):
    """Base class for invalid timer settings."""


class ZeroTimeoutError(TimerError):
    """Raised when the timeout is zero."""

    def __init__(self) -> None:
        super().__init__("zero timeout")


class FrequencyTooSmallError(TimerError):
    """Raised when the timeout is too short to be checked reliably."""

    def __init__(self) -> None:
        super().__init__("the frequency is too small")


class Timer:
    """Waits until ``timeout`` seconds pass without a refresh.

    The expiry is checked ten times per timeout period.
    """

    def __init__(self, timeout: float) -> None:
        if timeout == 0:
            raise ZeroTimeoutError()
        check_interval = timeout / FREQUENCY
        if check_interval < MIN_CHECK_INTERVAL:
            raise FrequencyTooSmallError()

        self.timeout = timeout
        self._check_interval = check_interval
        self._lock = threading.Lock()
        self._last_update = time.monotonic()
        self._closed = threading.Event()

    def close(self) -> None:
        """Stop the timer; any current and later waits return at once."""
        self._closed.set()

    def refresh(self) -> None:
        """Restart the countdown from now."""
        with self._lock:
            self._last_update = time.monotonic()

    def take_timeout(self) -> None:
        """Block until the timeout passes without a refresh, or the timer closes."""
        self.refresh()
        while not self._closed.wait(self._check_interval):
            with self._lock:
                deadline = self._last_update + self.timeout
            if deadline - time.monotonic() <= 0:
                return

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()