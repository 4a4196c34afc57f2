"""
Catalogue of the singleton strategies and their tradeoffs.

Rules of thumb:

- Normally use the eager variant.
- Use the holder variant only when lazy loading is an explicit requirement.
- Use the enumeration variant when instances go through serialization.
- Use double-checked locking for other special needs.
- The unsynchronized and locked lazy variants are here for illustration.
"""

import importlib
from dataclasses import dataclass
from enum import Enum
from types import ModuleType
from typing import Callable, Dict, Union

from .base import UnknownStrategyError


class Strategy(str, Enum):
    EAGER = "eager"
    UNSYNCHRONIZED = "unsynchronized"
    LOCKED = "locked"
    DOUBLE_CHECKED = "double_checked"
    HOLDER = "holder"
    ENUMERATION = "enumeration"


@dataclass(frozen=True)
class StrategyInfo:
    """
    Properties of one singleton strategy.

    Attributes
    ----------
    strategy : Strategy
        Strategy identifier.
    thread_safe : bool
        Whether concurrent first access yields exactly one instance.
    lazy : bool
        Whether construction waits for the first access.
    serialization_safe : bool
        Whether unpickling and copying return the canonical instance.
    mechanism : str
        What provides the thread safety.
    notes : str
        Tradeoffs worth knowing about.
    module : str
        Name of the implementing module inside the package.
    """

    strategy: Strategy
    thread_safe: bool
    lazy: bool
    serialization_safe: bool
    mechanism: str
    notes: str
    module: str


STRATEGIES: Dict[Strategy, StrategyInfo] = {
    Strategy.EAGER: StrategyInfo(
        strategy=Strategy.EAGER,
        thread_safe=True,
        lazy=False,
        serialization_safe=True,
        mechanism="module import lock",
        notes="Simplest; the instance exists even if it is never used",
        module="eager",
    ),
    Strategy.UNSYNCHRONIZED: StrategyInfo(
        strategy=Strategy.UNSYNCHRONIZED,
        thread_safe=False,
        lazy=True,
        serialization_safe=True,
        mechanism="none",
        notes="Concurrent first access can construct more than once",
        module="unsynchronized",
    ),
    Strategy.LOCKED: StrategyInfo(
        strategy=Strategy.LOCKED,
        thread_safe=True,
        lazy=True,
        serialization_safe=True,
        mechanism="lock on every access",
        notes="Correct, but every call pays for the lock",
        module="locked",
    ),
    Strategy.DOUBLE_CHECKED: StrategyInfo(
        strategy=Strategy.DOUBLE_CHECKED,
        thread_safe=True,
        lazy=True,
        serialization_safe=True,
        mechanism="lock around first construction, guard read before and after",
        notes="No lock cost once initialized; the reference is published after construction",
        module="double_checked",
    ),
    Strategy.HOLDER: StrategyInfo(
        strategy=Strategy.HOLDER,
        thread_safe=True,
        lazy=True,
        serialization_safe=True,
        mechanism="deferred import of a holder module",
        notes="Lazy timing with import-time safety and no explicit lock",
        module="holder",
    ),
    Strategy.ENUMERATION: StrategyInfo(
        strategy=Strategy.ENUMERATION,
        thread_safe=True,
        lazy=False,
        serialization_safe=True,
        mechanism="enum member created once with the class",
        notes="No construction path for a second member, including pickle and copy",
        module="enumeration",
    ),
}


def get_strategy(name: Union[str, Strategy]) -> Strategy:
    """
    Resolve a strategy name.

    Raises
    ------
    UnknownStrategyError
        If ``name`` does not name a strategy.
    """
    if isinstance(name, Strategy):
        return name
    try:
        return Strategy(name.strip().lower().replace("-", "_"))
    except ValueError:
        raise UnknownStrategyError(name) from None


def load_module(strategy: Union[str, Strategy]) -> ModuleType:
    info = STRATEGIES[get_strategy(strategy)]
    return importlib.import_module(f"{__package__}.{info.module}")


def load_accessor(strategy: Union[str, Strategy]) -> Callable[[], object]:
    """Return the ``get_instance`` function of a strategy's module."""
    return load_module(strategy).get_instance


def recommend(
    lazy: bool = False, serialization: bool = False, custom: bool = False
) -> Strategy:
    """
    Pick a strategy for the given requirements.

    Parameters
    ----------
    lazy : bool
        Construction must wait for first use.
    serialization : bool
        Instances are pickled or copied.
    custom : bool
        Other special needs, e.g. construction that must be controlled
        explicitly at runtime.
    """
    if serialization:
        return Strategy.ENUMERATION
    if lazy:
        return Strategy.HOLDER
    if custom:
        return Strategy.DOUBLE_CHECKED
    return Strategy.EAGER
