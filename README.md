# fixutils

Small helpers for building FIX session engines. They use only the standard library.

- **`fixutils.events`**: `Event`, an `IntEnum` of session lifecycle events (`DISCONNECT`, `CONNECT`, `STOPPED`, `LOGON`, `REQUEST`, `LOGOUT`), and `EventHandlerPool`, a thread-safe registry of callbacks per event.
- **`fixutils.timed_wg`**: `TimedWaitGroup`, a counter of outstanding tasks. Callers can wait on it, and the wait can give up after a timeout. When it does, it raises `WaitGroupExpired`, which is a subclass of `TimeoutError`.
- **`fixutils.timer`**: `Timer`, an inactivity timer. It blocks until no refresh has arrived for a full timeout, or until it is closed.
- **`fixutils.helpers`**: `parse_xml`, which loads an XML file and returns its root `xml.etree.ElementTree.Element`. On failure it raises `XMLLoadError`.

## Installation

```
pip install .
```

## Usage

### Event handlers

The pool calls the handlers for an event in the order they were registered. If a handler returns a false value, the remaining handlers for that event are skipped. Triggering an event that has no handlers does nothing.

```python
from fixutils.events import Event, EventHandlerPool

pool = EventHandlerPool()
pool.handle(Event.LOGON, lambda: print("logged on") or True)
pool.trigger(Event.LOGON)
pool.clean()  # forget every handler
```

### Waiting with a timeout

```python
import threading
from fixutils.timed_wg import TimedWaitGroup, WaitGroupExpired

wg = TimedWaitGroup()
wg.add(1)
threading.Thread(target=wg.done).start()

try:
    wg.wait_with_timeout(0.5)   # seconds
except WaitGroupExpired:
    print("workers did not finish in time")
```

`wait()` blocks with no limit. If `add()` or `done()` would bring the counter below zero, they raise `ValueError`.

### Inactivity timer

```python
from fixutils.timer import Timer

timer = Timer(30.0)     # seconds; raises ZeroTimeoutError for 0
timer.refresh()         # call whenever activity is seen
timer.take_timeout()    # blocks until 30 s pass with no refresh, or close() is called
```

`take_timeout()` refreshes the timer when it starts. After that it checks for expiry ten times per timeout period. The timer can also be used as a context manager, which calls `close()` on exit. Once the timer is closed, current and later calls to `take_timeout()` return at once.

A timeout so small, or negative, that the check interval falls below one microsecond raises `FrequencyTooSmallError`. Both `ZeroTimeoutError` and `FrequencyTooSmallError` derive from `TimerError`, which is a `ValueError`.

### Loading XML

```python
from fixutils.helpers import parse_xml, XMLLoadError

try:
    root = parse_xml("spec.xml")
except XMLLoadError as exc:
    print(exc)
```

## What this package does not do

This package holds supporting pieces only. It has no FIX message encoding or decoding, no session logic, no network transport and no message storage. It provides no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```