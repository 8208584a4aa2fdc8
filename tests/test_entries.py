"""Unit tests for Entry records and DataFrame / CSV conversion."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pandas as pd
import pytest

from historian.entries import (
    AggregatedEntry,
    Entry,
    entries_from_dataframe,
    entries_to_dataframe,
    load_entries_csv,
)


@pytest.fixture
def sample_df():
    """DataFrame with one row per interval."""
    return pd.DataFrame({
        "start_time": [0, 10, 20],
        "end_time": [10, 20, 30],
        "value": [1, 2.5, 3],
    })


def test_entry_is_immutable():
    e = Entry(0, 10, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.value = 2.0


def test_entry_duration():
    assert Entry(100, 250).duration_ms == 150
    assert AggregatedEntry(5, 5).duration_ms == 0


def test_entries_from_dataframe(sample_df):
    entries = entries_from_dataframe(sample_df)
    assert entries == [Entry(0, 10, 1.0), Entry(10, 20, 2.5), Entry(20, 30, 3.0)]
    assert all(isinstance(e.start_time, int) for e in entries)
    assert all(isinstance(e.value, float) for e in entries)


def test_entries_from_dataframe_custom_columns():
    df = pd.DataFrame({"t0": [5], "t1": [9], "mA": [42]})
    assert entries_from_dataframe(df, start_col="t0", end_col="t1", value_col="mA") == [Entry(5, 9, 42.0)]


def test_entries_from_dataframe_missing_column_raises(sample_df):
    with pytest.raises(ValueError) as exc_info:
        entries_from_dataframe(sample_df.drop(columns=["end_time"]))
    assert "end_time" in str(exc_info.value)


def test_entries_to_dataframe_roundtrip(sample_df):
    entries = entries_from_dataframe(sample_df)
    df = entries_to_dataframe(entries)
    assert list(df.columns) == ["start_time", "end_time", "value"]
    assert df["start_time"].tolist() == [0, 10, 20]
    assert df["value"].tolist() == [1.0, 2.5, 3.0]


def test_entries_to_dataframe_empty_has_columns():
    df = entries_to_dataframe([])
    assert df.empty
    assert list(df.columns) == ["start_time", "end_time", "value"]


def test_load_entries_csv(tmp_path: Path, sample_df):
    p = tmp_path / "history.csv"
    sample_df.to_csv(p, index=False)
    assert load_entries_csv(p) == entries_from_dataframe(sample_df)


def test_load_entries_csv_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError) as exc_info:
        load_entries_csv(tmp_path / "nope.csv")
    assert "CSV not found" in str(exc_info.value)
