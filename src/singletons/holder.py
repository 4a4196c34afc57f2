"""
Holder singleton - lazy, with no explicit lock.

The instance lives in a separate private module, ``singletons._holder``,
which is imported only on the first ``get_instance()`` call. The import
system executes a module body exactly once and makes concurrent importers
wait until it is done, so the holder gives lazy timing with the same
safety as the eager variant.
"""

import importlib
import logging
import sys

from .base import CountedSingleton

_HOLDER_MODULE = "singletons._holder"


class HolderSingleton(CountedSingleton):
    """Singleton built when its holder module is first imported."""


def get_instance() -> HolderSingleton:
    return importlib.import_module(_HOLDER_MODULE).INSTANCE


def is_initialized() -> bool:
    """Whether the holder module has been loaded yet."""
    return _HOLDER_MODULE in sys.modules


def construction_count() -> int:
    return HolderSingleton.construction_count


def reset() -> None:
    """Unload the holder module so the next access rebuilds the instance."""
    sys.modules.pop(_HOLDER_MODULE, None)
    package = sys.modules[__package__]
    if hasattr(package, "_holder"):
        delattr(package, "_holder")
    HolderSingleton._reset_singleton_state()
    logging.debug("Holder module unloaded")
