# tests/conftest.py
"""Pytest configuration for historian tests."""
from __future__ import annotations

import pytest

from historian.entries import Entry


@pytest.fixture
def contiguous_entries():
    """Three contiguous 10 ms entries: [0,10), [10,20), [20,30)."""
    return [
        Entry(start_time=0, end_time=10, value=1.0),
        Entry(start_time=10, end_time=20, value=2.0),
        Entry(start_time=20, end_time=30, value=3.0),
    ]
