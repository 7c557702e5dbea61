"""Angle and distance constraint primitives shared by both chain solvers.

Angles are radians kept in [0, 2pi).  Relative differences are computed by
rotating the plane so the anchor sits at pi, which keeps the comparison away
from the 0/2pi seam.
"""

import math

from critters.constants import TWO_PI
from critters.core.math_utils import PointLike, Vec2, ZERO_LENGTH, as_vec2, from_angle, length


def normalize_angle(angle: float) -> float:
    """Reduce *angle* into [0, 2pi)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0.0:
        angle += TWO_PI
    # Tiny negatives round up to exactly 2pi
    if angle >= TWO_PI:
        angle -= TWO_PI
    return angle


def relative_angle_diff(angle: float, anchor: float) -> float:
    """Signed turn needed to bring *angle* onto *anchor*, in (-pi, pi].

    Positive when *angle* lies clockwise of *anchor* (smaller heading),
    negative when it lies counter-clockwise.
    """
    rotated = normalize_angle(angle + math.pi - anchor)
    return math.pi - rotated


def constrain_angle(angle: float, anchor: float, constraint: float) -> float:
    """Hard-clamp *angle* to within *constraint* radians of *anchor*."""
    diff = relative_angle_diff(angle, anchor)
    if abs(diff) <= constraint:
        return normalize_angle(angle)
    if diff > constraint:
        return normalize_angle(anchor - constraint)
    return normalize_angle(anchor + constraint)


def constrain_distance(
    point: PointLike,
    anchor: PointLike,
    distance: float,
    fallback_angle: float = 0.0,
) -> Vec2:
    """Project *point* onto the circle of radius *distance* around *anchor*.

    When *point* coincides with *anchor* the ray is undefined; the direction
    ``fallback_angle`` (default +x) is used instead.
    """
    point = as_vec2(point)
    anchor = as_vec2(anchor)
    offset = point - anchor
    n = length(offset)
    if n < ZERO_LENGTH:
        return anchor + from_angle(fallback_angle, distance)
    return anchor + offset * (distance / n)
