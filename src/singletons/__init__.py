"""
Six ways to implement a singleton, with their tradeoffs.

Each variant lives in its own module and exposes ``get_instance()``:

- ``singletons.eager`` - built at import time
- ``singletons.unsynchronized`` - lazy, not thread safe
- ``singletons.locked`` - lazy, lock on every access
- ``singletons.double_checked`` - lazy, lock only around first construction
- ``singletons.holder`` - lazy, deferred import of a holder module
- ``singletons.enumeration`` - single-member ``Enum``

Variant modules are not imported here, so importing the package does not
trigger the eager variant's construction.
"""

from .base import CountedSingleton, SingletonError, UnknownStrategyError
from .catalog import (
    STRATEGIES,
    Strategy,
    StrategyInfo,
    get_strategy,
    load_accessor,
    load_module,
    recommend,
)

__all__ = [
    "CountedSingleton",
    "SingletonError",
    "UnknownStrategyError",
    "STRATEGIES",
    "Strategy",
    "StrategyInfo",
    "get_strategy",
    "load_accessor",
    "load_module",
    "recommend",
]
