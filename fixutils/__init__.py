"""Event handler pool, timed wait group, inactivity timer and XML loading helpers."""

__version__ = "0.1.0"
__all__ = ["events", "helpers", "timed_wg", "timer"]