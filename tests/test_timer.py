import threading
import time

import pytest

from fixutils.timer import (
    FrequencyTooSmallError,
    Timer,
    TimerError,
    ZeroTimeoutError,
)


def test_timer_timeout_zero():
    with pytest.raises(ZeroTimeoutError) as info:
        Timer(0)
    assert str(info.value) == "zero timeout"


def test_timer_timeout():
    delay = 0.01
    timer = Timer(delay)

    started = time.monotonic()
    result = timer.take_timeout()
    elapsed = time.monotonic() - started

    assert result is None
    assert elapsed >= delay


def test_too_small_frequency():
    with pytest.raises(FrequencyTooSmallError) as info:
        Timer(5e-6)
    assert str(info.value) == "the frequency is too small"


def test_negative_timeout_is_rejected():
    with pytest.raises(TimerError):
        Timer(-1)


def test_close_ends_wait_early():
    timer = Timer(10.0)
    closer = threading.Timer(0.02, timer.close)
    closer.start()

    started = time.monotonic()
    result = timer.take_timeout()
    elapsed = time.monotonic() - started

    closer.join()
    assert result is None
    assert elapsed < 5.0


def test_closed_timer_returns_immediately():
    with Timer(10.0) as timer:
        pass
    started = time.monotonic()
    result = timer.take_timeout()
    elapsed = time.monotonic() - started

    assert result is None
    assert elapsed < 5.0


def test_refresh_extends_the_wait():
    delay = 0.05
    pause = 0.03
    timer = Timer(delay)

    started = time.monotonic()
    refresher = threading.Thread(target=lambda: (time.sleep(pause), timer.refresh()))
    refresher.start()
    result = timer.take_timeout()
    elapsed = time.monotonic() - started
    refresher.join()

    assert result is None
    assert elapsed >= pause + delay