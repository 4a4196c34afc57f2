"""
Demo configuration.

Loaded from a JSON file and/or command-line flags; flags win.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, field_validator

from .catalog import Strategy
from .logging_setup import default_log_level


class DemoConfig(BaseModel):
    """
    Settings for the concurrency demo.

    Parameters
    ----------
    strategies : List[Strategy]
        Strategies to race, in order
    threads : int
        Threads released together on first access
    log_level : str
        Logging level name
    """

    strategies: List[Strategy] = Field(
        default_factory=lambda: list(Strategy),
        min_length=1,
        description="Strategies to race",
    )
    threads: int = Field(default=100, ge=2, description="Number of concurrent callers")
    log_level: str = Field(
        default_factory=default_log_level,
        validate_default=True,
        description="Logging level name",
    )

    @field_validator("strategies", mode="before")
    @classmethod
    def _normalize_strategies(cls, value):
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            # left for the list validator to reject
            return value
        return [
            v.strip().lower().replace("-", "_") if isinstance(v, str) else v
            for v in value
        ]

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value!r}")
        return value

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DemoConfig":
        with open(path, encoding="utf-8") as f:
            return cls.model_validate(json.load(f))
