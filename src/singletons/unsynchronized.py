"""
Unsynchronized lazy singleton - NOT thread safe.

The instance is built on the first call to ``get_instance()``. Nothing stops
two threads from both seeing ``None`` and both constructing, so under
concurrent first access callers can end up holding different objects. The
constructor sleeps briefly to make that window easy to hit; the demo runner
uses it to show the defect.

Use from a single thread only.
"""

import time

from .base import CountedSingleton

RACE_WINDOW_SEC = 0.01


class UnsynchronizedSingleton(CountedSingleton):
    """Lazily built singleton without any locking."""

    # concurrent first callers may each construct
    guard_construction = False

    def __init__(self):
        time.sleep(RACE_WINDOW_SEC)
        super().__init__()


def get_instance() -> UnsynchronizedSingleton:
    if UnsynchronizedSingleton._singleton_instance is None:
        UnsynchronizedSingleton._singleton_instance = UnsynchronizedSingleton()
    return UnsynchronizedSingleton._singleton_instance


def construction_count() -> int:
    return UnsynchronizedSingleton.construction_count


def reset() -> None:
    UnsynchronizedSingleton._reset_singleton_state()
