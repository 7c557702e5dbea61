"""Core math, chain solver and per-tick state."""

from critters.core.angle_math import (
    constrain_angle,
    constrain_distance,
    normalize_angle,
    relative_angle_diff,
)
from critters.core.chain import Chain, InvalidConfiguration

__all__ = [
    "Chain",
    "InvalidConfiguration",
    "constrain_angle",
    "constrain_distance",
    "normalize_angle",
    "relative_angle_diff",
]
