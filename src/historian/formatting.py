"""Presentation helpers: byte sizes, HTML-safe IDs, padding."""

from __future__ import annotations

import math
import re

# (unit size, label); a unit is used once the count reaches half of it.
BYTE_UNITS = [
    (1024 ** 3, "GB"),
    (1024 ** 2, "MB"),
    (1024, "KB"),
]

_INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9_\-]")


def describe_bytes(num_bytes: float) -> str:
    """
    Return a human readable description of a byte count.

    Examples: 511 -> '511.00 bytes', 512 -> '0.50 KB', 1048576 -> '1.00 MB'.
    """
    for size, label in BYTE_UNITS:
        if num_bytes >= size / 2:
            return f"{num_bytes / size:.2f} {label}"
    return f"{num_bytes:.2f} bytes"


def to_valid_id(text: str) -> str:
    """Make an HTML ID: keep only ASCII letters, digits, '_' and '-', lowercased."""
    return _INVALID_ID_CHARS.sub("", text).lower()


def pad_string(text: str, length: float, char: str) -> str:
    """Pad text on the right with char up to length (no-op if already long enough)."""
    if len(text) < length:
        return text + char * math.floor(length - len(text))
    return text
