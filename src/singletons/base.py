"""
Base types shared by the singleton variants.

Every variant class derives from ``CountedSingleton``, which

- counts how many times the class has been constructed, so the one-time
  construction guarantee can be checked from tests and from the demo runner,
- only lets the variant's own accessor construct it, and only once
  (unless the variant opts out to illustrate the race),
- redirects ``pickle`` and ``copy`` back to the module's ``get_instance()``.
"""

import importlib
import logging
import threading
from contextlib import contextmanager
from typing import Any, ClassVar

# classes the current thread may construct, granted by construction_permit()
_permits = threading.local()


class SingletonError(RuntimeError):
    """Raised when a second instance of a singleton class is requested."""


class UnknownStrategyError(KeyError):
    """Raised for a strategy name that is not part of the catalogue."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown singleton strategy: {self.name!r}"


def _restore(module_name: str) -> Any:
    """Unpickling hook: hand back the canonical instance of a variant module."""
    module = importlib.import_module(module_name)
    return module.get_instance()


class CountedSingleton:
    """
    Common base for the singleton variants.

    Attributes
    ----------
    construction_count : int
        Number of times ``__init__`` ran for this class.
    guard_construction : bool
        When True, construction outside ``construction_permit()`` or a second
        construction raises ``SingletonError``.
    """

    construction_count: ClassVar[int] = 0
    guard_construction: ClassVar[bool] = True

    _singleton_instance: ClassVar[Any] = None
    _constructed: ClassVar[bool] = False
    _state_lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls, *args, **kwargs):
        with cls._state_lock:
            if cls.guard_construction:
                if cls not in getattr(_permits, "classes", ()):
                    raise SingletonError(
                        f"{cls.__name__} is built by its module; use get_instance() instead"
                    )
                if cls.__dict__.get("_constructed", False):
                    raise SingletonError(
                        f"{cls.__name__} is a singleton; use get_instance() instead"
                    )
            cls._constructed = True
        return super().__new__(cls)

    def __init__(self):
        cls = type(self)
        with cls._state_lock:
            cls.construction_count = cls.__dict__.get("construction_count", 0) + 1
            count = cls.construction_count
        logging.info(f"{cls.__name__} constructed (construction #{count})")

    def __reduce__(self):
        return (_restore, (type(self).__module__,))

    @classmethod
    @contextmanager
    def construction_permit(cls):
        """Allow the current thread to construct ``cls`` inside the block."""
        granted = getattr(_permits, "classes", None)
        if granted is None:
            granted = _permits.classes = set()
        granted.add(cls)
        try:
            yield
        finally:
            granted.discard(cls)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x}>"

    @classmethod
    def _reset_singleton_state(cls) -> None:
        """Return the class to its uninitialized state. Test support only."""
        with cls._state_lock:
            cls._singleton_instance = None
            cls._constructed = False
            cls.construction_count = 0
        logging.debug(f"{cls.__name__} reset to uninitialized")
