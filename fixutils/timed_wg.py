"""A wait group whose wait can time out."""

from __future__ import annotations

import threading


class WaitGroupExpired(TimeoutError):
    """Raised when the timeout passes before every task reported done."""

    def __init__(self, message: str = "wait group timeout expired") -> None:
        super().__init__(message)


class TimedWaitGroup:
    """Counts outstanding tasks and lets callers wait for all of them."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._count = 0

    def add(self, delta: int) -> None:
        """Change the number of outstanding tasks by ``delta``."""
        with self._cond:
            count = self._count + delta
            if count < 0:
                raise ValueError("negative wait group counter")
            self._count = count
            if count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        """Mark one task as finished."""
        self.add(-1)

    def wait(self) -> None:
        """Block until no tasks are outstanding."""
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)

    def wait_with_timeout(self, timeout: float) -> None:
        """Wait up to ``timeout`` seconds; raise WaitGroupExpired on expiry."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._count == 0, timeout):
                raise WaitGroupExpired()