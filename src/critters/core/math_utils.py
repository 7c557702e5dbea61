"""NumPy-backed 2D vector utilities.

Vectors are plain numpy arrays of shape (2,), dtype float64.  Screen
convention: +x right, +y down, headings measured with ``atan2(y, x)``.
"""

import math
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

# Type aliases
Vec2 = NDArray[np.float64]
PointLike = Union[Vec2, Sequence[float]]

# Below this length a vector has no usable direction
ZERO_LENGTH = 1e-12


def vec2(x: float = 0.0, y: float = 0.0) -> Vec2:
    return np.array([x, y], dtype=np.float64)


def as_vec2(p: PointLike) -> Vec2:
    """Copy any 2-sequence into a fresh float64 vector."""
    return np.array([p[0], p[1]], dtype=np.float64)


def length(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def is_zero(v: Vec2) -> bool:
    return length(v) < ZERO_LENGTH


def heading(v: Vec2) -> float:
    """Angle of *v* from the +x axis, in (-pi, pi]."""
    return math.atan2(v[1], v[0])


def from_angle(angle: float, magnitude: float = 1.0) -> Vec2:
    return np.array([math.cos(angle) * magnitude, math.sin(angle) * magnitude],
                    dtype=np.float64)


def normalize(v: Vec2) -> Vec2:
    n = length(v)
    if n < ZERO_LENGTH:
        return np.zeros(2, dtype=np.float64)
    return v / n


def set_mag(v: Vec2, magnitude: float) -> Vec2:
    """Rescale *v* to *magnitude*.  The zero vector stays zero."""
    return normalize(v) * magnitude


def perpendicular(v: Vec2) -> Vec2:
    """Rotate *v* by +90 degrees."""
    return np.array([-v[1], v[0]], dtype=np.float64)


def lerp_vec2(a: Vec2, b: Vec2, t: float) -> Vec2:
    return a + (b - a) * t


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
