"""Session lifecycle events and a registry of handlers for them."""

from __future__ import annotations

import threading
from collections import defaultdict
from enum import IntEnum
from typing import Callable

EventHandler = Callable[[], bool]


class Event(IntEnum):
    """Lifecycle events a session can report."""

    DISCONNECT = 0
    """The connection went down."""
    CONNECT = 1
    """The connection came up."""
    STOPPED = 2
    """The handler was stopped."""
    LOGON = 3
    """A Logon message was received."""
    REQUEST = 4
    """A Logon message was sent and an answer is awaited."""
    LOGOUT = 5
    """A Logout message was received."""


class EventHandlerPool:
    """Stores handlers per event and calls them when the event occurs.

    Handlers run in the order they were registered. A handler that returns
    a false value stops the remaining handlers for that event from running.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pool: defaultdict[Event, list[EventHandler]] = defaultdict(list)

    def handle(self, event: Event, handler: EventHandler) -> None:
        """Register ``handler`` to be called when ``event`` is triggered."""
        with self._lock:
            self._pool[event].append(handler)

    def trigger(self, event: Event) -> None:
        """Call the handlers of ``event`` until one of them returns false."""
        with self._lock:
            handlers = list(self._pool.get(event, ()))
        for handler in handlers:
            if not handler():
                return

    def clean(self) -> None:
        """Drop every registered handler."""
        with self._lock:
            self._pool.clear()