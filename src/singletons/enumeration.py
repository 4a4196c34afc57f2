"""
Enumeration singleton - a closed ``Enum`` with a single member.

``enum.Enum`` builds its members once, when the class body is executed, and
offers no public constructor for new members: ``EnumSingleton(value)`` and
``EnumSingleton[name]`` are lookups, ``pickle`` stores the member by value,
and ``copy``/``deepcopy`` return the member itself. A second instance cannot
be materialized by any of those paths, and an enum with members cannot be
subclassed.

This is the variant to reach for when the object has to survive
serialization.
"""

import enum
import logging
import threading

_constructions = 0
_constructions_lock = threading.Lock()


class EnumSingleton(enum.Enum):
    """The one and only instance, ``EnumSingleton.INSTANCE``."""

    INSTANCE = "instance"

    def __init__(self, value):
        global _constructions
        with _constructions_lock:
            _constructions += 1
        logging.info(f"EnumSingleton.{self.name} constructed")

    def describe(self) -> str:
        return f"{type(self).__name__}.{self.name} at {id(self):#x}"


def get_instance() -> EnumSingleton:
    return EnumSingleton.INSTANCE


def construction_count() -> int:
    return _constructions
