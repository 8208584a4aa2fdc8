"""
Logging for historian: package logger setup and log-message helpers.

Library modules only call get_logger(__name__); a dashboard or script that
wants output calls configure_logging() once. historian never writes log
files and never configures the root logger.

Entry times are epoch milliseconds, which are unreadable in a log line, so
format_time_range() renders a half-open query range with its UTC timestamps:

    logger.debug(f"query {format_time_range(start, end)} outside data span")
    -> query [0, 1000) 1970-01-01T00:00:00+00:00 .. 1970-01-01T00:00:01+00:00 outside data span
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

import pandas as pd

# Environment variable consulted when no explicit level is passed.
LOG_LEVEL_ENV_VAR = "HISTORIAN_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "historian"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the historian logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to the
        HISTORIAN_LOG_LEVEL env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to DEFAULT_FMT.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        If True, remove existing handlers before adding a new one. If False,
        do nothing when a stderr handler is already attached.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt=fmt if fmt is not None else DEFAULT_FMT,
        datefmt=datefmt if datefmt is not None else DEFAULT_DATEFMT,
    )

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name; None gives the package-level 'historian' logger.

    Use like:
        logger = get_logger(__name__)
    """
    if name is None:
        name = ROOT_LOGGER_NAME
    return logging.getLogger(name)


def _utc_timestamp(ms: float) -> pd.Timestamp:
    try:
        return pd.Timestamp(ms, unit="ms", tz="UTC")
    except (pd.errors.OutOfBoundsDatetime, OverflowError, ValueError):
        return pd.NaT


def format_time_range(start_ms: float, end_ms: float) -> str:
    """Render [start_ms, end_ms) plus UTC timestamps; out-of-range times show as NaT."""
    start_ts = _utc_timestamp(start_ms)
    end_ts = _utc_timestamp(end_ms)
    return f"[{start_ms}, {end_ms}) {start_ts.isoformat()} .. {end_ts.isoformat()}"
