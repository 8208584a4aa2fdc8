"""Utility functions for historian."""

from .logging import configure_logging, format_time_range, get_logger

__all__ = [
    "configure_logging",
    "format_time_range",
    "get_logger",
]
