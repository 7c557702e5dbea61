"""Curve conversion helpers for drawing backends that only know cubics."""

from typing import Sequence

from critters.core.math_utils import PointLike, Vec2, as_vec2


def catmull_rom_to_bezier(
    points: Sequence[PointLike],
) -> list[tuple[Vec2, Vec2, Vec2, Vec2]]:
    """Convert a uniform Catmull-Rom spline into cubic Bezier segments.

    The first and last points are control points only: the curve runs from
    ``points[1]`` to ``points[-2]``.  Returns ``(start, c1, c2, end)`` tuples;
    fewer than four points produce no segments.
    """
    pts = [as_vec2(p) for p in points]
    segments = []
    for i in range(1, len(pts) - 2):
        p0, p1, p2, p3 = pts[i - 1], pts[i], pts[i + 1], pts[i + 2]
        c1 = p1 + (p2 - p0) / 6.0
        c2 = p2 - (p3 - p1) / 6.0
        segments.append((p1, c1, c2, p2))
    return segments
