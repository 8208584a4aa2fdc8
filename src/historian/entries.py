"""Entry records and their tabular (pandas) form.

An Entry is a half-open time interval [start_time, end_time) in milliseconds
since the epoch, carrying a numeric value. Entries are immutable; the range
filters return new lists holding the same objects.

Dashboards usually receive history as CSV/DataFrames, so this module also
converts between DataFrame rows and Entry lists.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Union

import pandas as pd

from historian.utils.logging import get_logger

logger = get_logger(__name__)

# Default column names for the tabular form.
START_COL = "start_time"
END_COL = "end_time"
VALUE_COL = "value"


@dataclass(frozen=True)
class Entry:
    """A half-open interval [start_time, end_time) with a numeric value."""
    start_time: int  # ms since epoch, inclusive
    end_time: int    # ms since epoch, exclusive
    value: float = 0.0

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class AggregatedEntry:
    """Same interval shape as Entry; value is one payload per service."""
    start_time: int
    end_time: int
    services: tuple[Any, ...] = ()

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time


def entries_from_dataframe(
    df: pd.DataFrame,
    *,
    start_col: str = START_COL,
    end_col: str = END_COL,
    value_col: str = VALUE_COL,
) -> list[Entry]:
    """Build Entry objects from DataFrame rows, preserving row order.

    Args:
        df: DataFrame with start, end and value columns.
        start_col: Column holding start times (ms).
        end_col: Column holding end times (ms).
        value_col: Column holding values.

    Returns:
        List of Entry, one per row.

    Raises:
        ValueError: If any of the three columns is missing.
    """
    missing = [c for c in (start_col, end_col, value_col) if c not in df.columns]
    if missing:
        raise ValueError(f"df is missing required column(s): {missing!r}")

    starts = pd.to_numeric(df[start_col]).astype("int64").tolist()
    ends = pd.to_numeric(df[end_col]).astype("int64").tolist()
    values = pd.to_numeric(df[value_col]).astype(float).tolist()
    entries = [Entry(s, e, v) for s, e, v in zip(starts, ends, values)]
    logger.debug(f"built {len(entries)} entries from dataframe columns {start_col!r}, {end_col!r}, {value_col!r}")
    return entries


def entries_to_dataframe(entries: Iterable[Entry]) -> pd.DataFrame:
    """Convert entries to a DataFrame with columns start_time, end_time, value."""
    rows = [
        {START_COL: d.start_time, END_COL: d.end_time, VALUE_COL: d.value}
        for d in entries
    ]
    return pd.DataFrame(rows, columns=[START_COL, END_COL, VALUE_COL])


def load_entries_csv(
    path: Union[str, os.PathLike],
    *,
    start_col: str = START_COL,
    end_col: str = END_COL,
    value_col: str = VALUE_COL,
) -> list[Entry]:
    """Load a CSV of intervals into Entry objects.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If a required column is missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    df = pd.read_csv(path)
    logger.debug(f"read {len(df)} rows from {path}")
    return entries_from_dataframe(
        df,
        start_col=start_col,
        end_col=end_col,
        value_col=value_col,
    )
