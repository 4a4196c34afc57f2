"""
Concurrency demo - race the singleton strategies.

For each strategy, a batch of threads is parked on a barrier and released
together onto ``get_instance()``. The run reports how many distinct objects
the callers received and how many times the class was constructed.

Usage:
    python -m singletons                              # all strategies, 100 threads
    python -m singletons --strategy locked --threads 8
    python -m singletons --config demo.json --log-level DEBUG
"""

import argparse
import logging
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from pydantic import ValidationError

from .base import UnknownStrategyError
from .catalog import STRATEGIES, Strategy, get_strategy, load_module
from .config import DemoConfig
from .logging_setup import configure_logging


@dataclass(frozen=True)
class RaceResult:
    """Outcome of one concurrent first-access race."""

    strategy: Strategy
    threads: int
    distinct_instances: int
    constructions: int
    elapsed_sec: float

    @property
    def ok(self) -> bool:
        return self.distinct_instances == 1 and self.constructions <= 1

    def summary(self) -> str:
        info = STRATEGIES[self.strategy]
        status = "OK" if self.ok else "FAIL"
        if not info.thread_safe:
            status += " (not thread safe)"
        return (
            f"{self.strategy.value:<15} threads={self.threads:<4} "
            f"instances={self.distinct_instances:<3} "
            f"constructions={self.constructions:<3} "
            f"elapsed={self.elapsed_sec * 1000:.1f}ms {status}"
        )


def race(strategy: Union[str, Strategy], threads: int = 100) -> RaceResult:
    """
    Release ``threads`` callers onto a strategy's accessor at the same time.

    Lazy strategies are reset first so the race covers the first access.
    Eager strategies are already built, so they report zero constructions.

    Parameters
    ----------
    strategy : Union[str, Strategy]
        Strategy to race.
    threads : int
        Number of concurrent callers, at least 2.

    Returns
    -------
    RaceResult
        Distinct instances seen and constructions performed during the race.
    """
    if threads < 2:
        raise ValueError("threads must be at least 2")
    strategy = get_strategy(strategy)
    module = load_module(strategy)

    reset = getattr(module, "reset", None)
    if reset is not None:
        reset()
    before = module.construction_count()

    barrier = threading.Barrier(threads)
    results: List[object] = [None] * threads
    errors: List[BaseException] = []

    def worker(index: int) -> None:
        barrier.wait()
        try:
            results[index] = module.get_instance()
        except Exception as exc:
            errors.append(exc)

    workers = [
        threading.Thread(target=worker, args=(i,), name=f"{strategy.value}-{i}")
        for i in range(threads)
    ]
    start = time.perf_counter()
    for t in workers:
        t.start()
    for t in workers:
        t.join()
    elapsed = time.perf_counter() - start

    if errors:
        raise errors[0]

    result = RaceResult(
        strategy=strategy,
        threads=threads,
        distinct_instances=len({id(r) for r in results}),
        constructions=module.construction_count() - before,
        elapsed_sec=elapsed,
    )
    if result.ok:
        logging.info(f"{strategy.value}: {threads} callers shared one instance")
    else:
        logging.warning(
            f"{strategy.value}: {result.distinct_instances} instances, "
            f"{result.constructions} constructions across {threads} callers"
        )
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="singletons-demo",
        description="Race singleton strategies under concurrent first access",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        dest="strategies",
        metavar="NAME",
        help=f"Strategy to race, repeatable (default: all of {', '.join(s.value for s in Strategy)})",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Number of concurrent callers (default: 100)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $SINGLETONS_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with strategies/threads/log_level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = DemoConfig.from_file(args.config) if args.config else DemoConfig()
        overrides = {
            key: value
            for key, value in (
                (
                    "strategies",
                    [get_strategy(s) for s in args.strategies]
                    if args.strategies
                    else None,
                ),
                ("threads", args.threads),
                ("log_level", args.log_level),
            )
            if value is not None
        }
        if overrides:
            config = DemoConfig.model_validate({**config.model_dump(), **overrides})
    except UnknownStrategyError as exc:
        parser.error(str(exc))
    except ValidationError as exc:
        parser.error(f"invalid configuration:\n{exc}")
    except (OSError, ValueError) as exc:
        parser.error(f"cannot read config: {exc}")

    configure_logging(config.log_level)

    failed = []
    for strategy in config.strategies:
        result = race(strategy, threads=config.threads)
        print(result.summary())
        if STRATEGIES[strategy].thread_safe and not result.ok:
            failed.append(strategy)

    if failed:
        logging.error(f"Thread-safe strategies failed: {[s.value for s in failed]}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
