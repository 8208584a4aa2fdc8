"""
Numeric helpers for battery history: correlation, charge, derivative.

Entries are read by attribute (start_time, end_time, value); see
historian.entries.Entry.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from historian.entries import Entry
from historian.time_units import MSECS_IN_HOUR, MSECS_IN_SEC, SECS_IN_HOUR


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Compute the Pearson correlation of two vectors.

    Zero variance in either vector is not guarded against: the result is
    nan (or inf) and callers must check it.

    Args:
        x: Numeric vector.
        y: Numeric vector of the same length as x.

    Returns:
        The correlation coefficient.

    Raises:
        ValueError: If x and y differ in length.
    """
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    if xa.shape != ya.shape:
        raise ValueError(f"x and y must have the same length, got {len(xa)} and {len(ya)}")
    if xa.size == 0:
        return float("nan")
    dx = xa - xa.mean()
    dy = ya - ya.mean()
    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.sum(dx * dy) / np.sqrt(np.sum(dx * dx) * np.sum(dy * dy))
    return float(r)


def calculate_total_charge(data: Sequence[Entry]) -> float:
    """
    Return the total charge (mAh) consumed in the data.

    Each entry's value is a current in mA held for the entry's duration.
    Visible data may be missing readings, so no constant sampling rate is
    assumed; each entry's readings are summed at its own rate (1 / duration).
    A zero-duration entry has rate 0 and turns the total into inf (nan if
    its value is 0).

    Raises:
        AssertionError: If any entry has end_time < start_time.
    """
    total = np.float64(0.0)
    for d in data:
        duration_ms = d.end_time - d.start_time
        if duration_ms < 0:
            raise AssertionError(f"Negative duration: start={d.start_time}, end={d.end_time}")
        # Readings per second for this entry; 0 for a zero-duration entry,
        # which makes the total inf (or nan for a zero value).
        hz = np.float64(MSECS_IN_SEC / duration_ms if duration_ms != 0 else 0.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            total += d.value / hz
    return float(total / SECS_IN_HOUR)


def calculate_total_charge_formatted(data: Sequence[Entry]) -> str:
    """Total charge (mAh) rounded to 2 decimal places, as a string."""
    return f"{calculate_total_charge(data):.2f}"


def generate_derivative(data: Sequence[Entry]) -> list[Entry]:
    """
    Generate the first derivative of the data, in value per hour.

    Entry i of the result spans [data[i].start_time, data[i+1].start_time).
    Pairs with identical start times get a derivative of 0.
    """
    derivative = []
    for cur, nxt in zip(data, data[1:]):
        dy = nxt.value - cur.value
        dx = (nxt.start_time - cur.start_time) / MSECS_IN_HOUR
        derivative.append(Entry(
            start_time=cur.start_time,
            end_time=nxt.start_time,
            value=0 if dx == 0 else dy / dx,
        ))
    return derivative
