"""
Time-range queries over interval data.

Both the query range and entry ranges are half-open: start inclusive, end
exclusive. An entry that only touches the query at a boundary
(query end == entry start, or query start == entry end) is excluded.

Two flavours:
  1. in_time_range: data must be sorted by start_time, contiguous and
     non-overlapping. Two bound searches plus a slice, O(log n).
  2. in_time_range_multi: any data (unsorted, overlapping, duplicates).
     Linear scan. Avoid for very large datasets (80,000+ points).

The *_df variants run the same algorithms over pandas DataFrame columns
using numpy.searchsorted and boolean masks.
"""

from __future__ import annotations

import bisect
import logging
from operator import attrgetter
from typing import Sequence, TypeVar

import numpy as np
import pandas as pd

from historian.entries import END_COL, START_COL
from historian.utils.logging import format_time_range, get_logger

logger = get_logger(__name__)

# Any record with start_time / end_time attributes (Entry, AggregatedEntry, ...).
E = TypeVar("E")

_by_start = attrgetter("start_time")
_by_end = attrgetter("end_time")


def _start_index(insertion: int, exact: bool) -> int:
    """Index of the first entry that can overlap the query start.

    When no entry starts exactly at the query start, the entry just before
    the insertion point is the one whose interval may still be open there.
    """
    if exact or insertion == 0:
        return insertion
    return insertion - 1


def _ranges_intersect(a_start, a_end, b_start, b_end) -> bool:
    """Closed-range intersection test; each range's bounds are normalized first."""
    a_lo, a_hi = min(a_start, a_end), max(a_start, a_end)
    b_lo, b_hi = min(b_start, b_end), max(b_start, b_end)
    return a_lo <= b_hi and b_lo <= a_hi


# -----------------------------------------------------------------------------
# Sequences of entries
# -----------------------------------------------------------------------------


def in_time_range_multi(start_time: float, end_time: float, data: Sequence[E]) -> list[E]:
    """
    Return a shallow copy of the entries overlapping [start_time, end_time).

    The data can hold multiple entries with the same start and end times, and
    needs no particular order. No validation is done on the query range.

    Args:
        start_time: Start of the query range (inclusive).
        end_time: End of the query range (exclusive).
        data: Entries to filter.

    Returns:
        Matching entries in their original order.
    """
    return [
        d for d in data
        if _ranges_intersect(start_time, end_time, d.start_time, d.end_time)
        and end_time != d.start_time
        and start_time != d.end_time
    ]


def in_time_range(start_time: float, end_time: float, data: Sequence[E]) -> list[E]:
    """
    Return a shallow copy of the entries overlapping [start_time, end_time).

    Data entries must be sorted by start_time, contiguous and non overlapping.
    This is assumed, not verified; other input gives unspecified results.

    Args:
        start_time: Start of the query range (inclusive).
        end_time: End of the query range (exclusive).
        data: Sorted entries to filter.

    Returns:
        The contiguous run of entries overlapping the query.
    """
    if not data:
        return []
    # Query comes after the last end time, or before the first start time.
    if start_time >= data[-1].end_time or end_time <= data[0].start_time:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"query {format_time_range(start_time, end_time)} outside data span, nothing to search")
        return []

    n = len(data)
    i = bisect.bisect_left(data, start_time, key=_by_start)
    start_index = _start_index(i, i < n and data[i].start_time == start_time)

    # The left bound is the exact match when there is one, else the first
    # entry ending after end_time; either way it is the inclusive end.
    end_index = bisect.bisect_left(data, end_time, key=_by_end)

    return list(data[start_index:end_index + 1])


# -----------------------------------------------------------------------------
# DataFrames (one row per entry)
# -----------------------------------------------------------------------------


def in_time_range_df(
    df: pd.DataFrame,
    start_time: float,
    end_time: float,
    *,
    start_col: str = START_COL,
    end_col: str = END_COL,
) -> pd.DataFrame:
    """
    DataFrame version of in_time_range; same preconditions and semantics.

    Args:
        df: Rows sorted by start_col, contiguous and non overlapping.
        start_time: Start of the query range (inclusive).
        end_time: End of the query range (exclusive).
        start_col: Column holding entry start times.
        end_col: Column holding entry end times.

    Returns:
        Copy of the matching contiguous row slice (original index kept).
    """
    if df.empty:
        return df.iloc[0:0].copy()
    starts = df[start_col].to_numpy()
    ends = df[end_col].to_numpy()
    if start_time >= ends[-1] or end_time <= starts[0]:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"query {format_time_range(start_time, end_time)} outside data span, nothing to search")
        return df.iloc[0:0].copy()

    n = len(starts)
    i = int(np.searchsorted(starts, start_time, side="left"))
    start_index = _start_index(i, i < n and starts[i] == start_time)
    end_index = int(np.searchsorted(ends, end_time, side="left"))
    return df.iloc[start_index:end_index + 1].copy()


def in_time_range_multi_df(
    df: pd.DataFrame,
    start_time: float,
    end_time: float,
    *,
    start_col: str = START_COL,
    end_col: str = END_COL,
) -> pd.DataFrame:
    """DataFrame version of in_time_range_multi (boolean mask, any row order)."""
    starts = df[start_col].to_numpy()
    ends = df[end_col].to_numpy()
    q_lo, q_hi = min(start_time, end_time), max(start_time, end_time)
    d_lo = np.minimum(starts, ends)
    d_hi = np.maximum(starts, ends)
    mask = (
        (q_lo <= d_hi)
        & (d_lo <= q_hi)
        & (starts != end_time)
        & (ends != start_time)
    )
    return df[mask].copy()
