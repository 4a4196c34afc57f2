"""Logging configuration for the demo entry point."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "SINGLETONS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(message)s"


def default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : Optional[str]
        Level name; falls back to ``SINGLETONS_LOG_LEVEL`` or INFO.
    """
    level_name = (level or default_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
