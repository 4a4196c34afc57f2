"""
Eager singleton - instance built when the module is imported.

Thread safety comes from the import system: a module body runs once, and
concurrent importers wait on the module's import lock until it finishes.
This is the simplest variant and the default recommendation. The cost is
that the instance exists even if nobody ever asks for it.
"""

from .base import CountedSingleton


class EagerSingleton(CountedSingleton):
    """Singleton constructed at import time."""


with EagerSingleton.construction_permit():
    _INSTANCE = EagerSingleton()
EagerSingleton._singleton_instance = _INSTANCE


def get_instance() -> EagerSingleton:
    """Return the instance created on import."""
    return _INSTANCE


def construction_count() -> int:
    return EagerSingleton.construction_count
