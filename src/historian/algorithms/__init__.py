"""Algorithms behind the battery history views.

time_range is the interval query core; stats and geometry are leaf helpers.
"""

from historian.algorithms.geometry import INTERSECT_EPSILON, intersect_line_seg, intersect_seg_seg
from historian.algorithms.stats import (
    calculate_total_charge,
    calculate_total_charge_formatted,
    generate_derivative,
    pearson_correlation,
)
from historian.algorithms.time_range import (
    in_time_range,
    in_time_range_df,
    in_time_range_multi,
    in_time_range_multi_df,
)

__all__ = [
    "INTERSECT_EPSILON",
    "calculate_total_charge",
    "calculate_total_charge_formatted",
    "generate_derivative",
    "in_time_range",
    "in_time_range_df",
    "in_time_range_multi",
    "in_time_range_multi_df",
    "intersect_line_seg",
    "intersect_seg_seg",
    "pearson_correlation",
]
