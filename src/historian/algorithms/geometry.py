"""2D segment intersection tests used for hit-testing drawn lines."""

from __future__ import annotations

from typing import Sequence

# Cross products with magnitude at or below this count as touching.
INTERSECT_EPSILON = 1e-9

Point = Sequence[float]


def intersect_line_seg(a: Point, b: Point, c: Point, d: Point) -> bool:
    """
    Check if line (a, b) intersects segment (c, d).

    A near-zero cross product for either segment endpoint returns True
    straight away (lenient collinear handling, kept as-is).
    """
    ab = (b[0] - a[0], b[1] - a[1])
    ac = (c[0] - a[0], c[1] - a[1])
    ad = (d[0] - a[0], d[1] - a[1])
    cross_cb = ac[1] * ab[0] - ac[0] * ab[1]
    cross_bd = ab[1] * ad[0] - ab[0] * ad[1]
    if abs(cross_cb) <= INTERSECT_EPSILON or abs(cross_bd) <= INTERSECT_EPSILON:
        return True
    return cross_cb * cross_bd > 0


def intersect_seg_seg(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Check if segment (a, b) intersects segment (c, d)."""
    return intersect_line_seg(a, b, c, d) and intersect_line_seg(c, d, a, b)
