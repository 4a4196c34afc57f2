"""
Locked lazy singleton - thread safe, lock taken on every access.

The ``singleton`` class decorator replaces the class with an accessor
function. Every call goes through a ``threading.Lock``, so only one thread
can run the "is it built yet?" check and the construction at a time.

Correct, but every caller pays for the lock even after the instance exists.
See ``double_checked`` for the variant that only locks during construction.
"""

import contextlib
import threading
from typing import Any

from .base import CountedSingleton


def singleton(cls):
    """
    Replace ``cls`` with a locking accessor for its single instance.

    The accessor keeps the class name, so ``LockedSingleton()`` reads like a
    constructor but always hands back the same object. The class itself is
    still reachable as ``accessor._singleton_class``; for ``CountedSingleton``
    subclasses, constructing it directly raises ``SingletonError``.

    Args:
        cls: Class to wrap. ``CountedSingleton`` subclasses are built inside
            their ``construction_permit()``.

    Returns
    -------
        function: Accessor with ``reset`` and ``_singleton_class`` attributes.
    """
    if not hasattr(cls, "_singleton_instance"):
        cls._singleton_instance = None
    permit = getattr(cls, "construction_permit", contextlib.nullcontext)
    lock = threading.Lock()

    def get_instance(*args, **kwargs) -> Any:
        """
        Return the instance, building it under the lock on the first call.

        Arguments reach the constructor on the first call only; once the
        instance exists they are ignored.
        """
        with lock:
            if cls._singleton_instance is None:
                with permit():
                    cls._singleton_instance = cls(*args, **kwargs)
            return cls._singleton_instance

    def reset_instance():
        """
        Drop the instance under the lock.

        Delegates to ``_reset_singleton_state`` when the class has one, which
        also clears the construction counter; otherwise only the stored
        instance is cleared.
        """
        with lock:
            reset_state = getattr(cls, "_reset_singleton_state", None)
            if reset_state is not None:
                reset_state()
            else:
                cls._singleton_instance = None

    get_instance._singleton_class = cls  # type: ignore
    get_instance.reset = reset_instance  # type: ignore
    get_instance.__name__ = cls.__name__
    get_instance.__qualname__ = cls.__qualname__
    get_instance.__doc__ = cls.__doc__

    return get_instance


@singleton
class LockedSingleton(CountedSingleton):
    """Lazily built singleton guarded by a lock on every access."""


def get_instance() -> CountedSingleton:
    return LockedSingleton()


def construction_count() -> int:
    return LockedSingleton._singleton_class.construction_count  # type: ignore


def reset() -> None:
    LockedSingleton.reset()  # type: ignore
