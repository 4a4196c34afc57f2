"""
Double-checked locking singleton.

``get_instance()`` reads the instance reference without a lock. Only when it
is still ``None`` does the caller take the lock and check again before
constructing, so after initialization no caller touches the lock at all.

The reference is published only after ``__init__`` has returned, and it is
read once into a local, so a caller either sees ``None`` or a fully built
instance.
"""

import threading

from .base import CountedSingleton

_lock = threading.Lock()


class DoubleCheckedSingleton(CountedSingleton):
    """Lazily built singleton that locks only around first construction."""


def get_instance() -> DoubleCheckedSingleton:
    instance = DoubleCheckedSingleton._singleton_instance
    if instance is None:
        with _lock:
            instance = DoubleCheckedSingleton._singleton_instance
            if instance is None:
                with DoubleCheckedSingleton.construction_permit():
                    instance = DoubleCheckedSingleton()
                DoubleCheckedSingleton._singleton_instance = instance
    return instance


def construction_count() -> int:
    return DoubleCheckedSingleton.construction_count


def reset() -> None:
    with _lock:
        DoubleCheckedSingleton._reset_singleton_state()
