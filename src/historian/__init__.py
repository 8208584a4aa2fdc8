"""
historian: helpers for battery history visualization dashboards.

This package provides:
- Time-range queries over sorted interval data (in_time_range, in_time_range_multi)
- Correlation, total charge and derivative helpers
- Segment intersection tests
- Formatting helpers (byte sizes, HTML IDs, padding)
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from historian.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from historian.utils.logging import configure_logging, get_logger

from historian.algorithms import (
    INTERSECT_EPSILON,
    calculate_total_charge,
    calculate_total_charge_formatted,
    generate_derivative,
    in_time_range,
    in_time_range_df,
    in_time_range_multi,
    in_time_range_multi_df,
    intersect_line_seg,
    intersect_seg_seg,
    pearson_correlation,
)
from historian.entries import (
    AggregatedEntry,
    Entry,
    entries_from_dataframe,
    entries_to_dataframe,
    load_entries_csv,
)
from historian.formatting import describe_bytes, pad_string, to_valid_id

# NullHandler so logs don't reach the root logger unless an application
# configures logging.
_logger = logging.getLogger("historian")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "AggregatedEntry",
    "Entry",
    "INTERSECT_EPSILON",
    "calculate_total_charge",
    "calculate_total_charge_formatted",
    "configure_logging",
    "describe_bytes",
    "entries_from_dataframe",
    "entries_to_dataframe",
    "generate_derivative",
    "get_logger",
    "in_time_range",
    "in_time_range_df",
    "in_time_range_multi",
    "in_time_range_multi_df",
    "intersect_line_seg",
    "intersect_seg_seg",
    "load_entries_csv",
    "pad_string",
    "pearson_correlation",
    "to_valid_id",
]

__version__ = "0.1.0"
