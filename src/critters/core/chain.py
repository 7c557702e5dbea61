"""Joint chain with two resolution modes.

``resolve`` is a follow-the-leader pass: the head snaps onto the target and
every later joint is pulled along at a fixed link length, with each link's
heading clamped to within ``angle_constraint`` of the link before it.  Used
for spines.

``fabrik_resolve`` is one forward sweep (head pinned to the target) followed
by one backward sweep (tail pinned to the anchor), distance constraints
only.  Used for legs.  It is deliberately not iterated to convergence; leg
stiffness tuning depends on the one-shot result.
"""

import logging
import math

import numpy as np
from numpy.typing import NDArray

from critters.constants import TWO_PI
from critters.core.angle_math import constrain_angle, constrain_distance, normalize_angle
from critters.core.math_utils import PointLike, Vec2, as_vec2, from_angle, heading, is_zero

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a chain or creature is built with unusable parameters."""


class Chain:
    """Fixed-size sequence of joints joined by rigid links.

    Parameters
    ----------
    origin : point
        Position of the head joint at construction.
    joint_count : int
        Number of joints, at least 2.  Never changes afterwards.
    link_size : float
        Rest length between adjacent joints.
    angle_constraint : float
        Maximum heading change between consecutive links.  Defaults to a
        full turn (unconstrained).
    """

    def __init__(
        self,
        origin: PointLike,
        joint_count: int,
        link_size: float,
        angle_constraint: float = TWO_PI,
    ):
        if joint_count < 2:
            raise InvalidConfiguration(
                f"A chain needs at least 2 joints, got {joint_count}"
            )
        if link_size <= 0:
            raise InvalidConfiguration(f"link_size must be positive, got {link_size}")

        self.link_size = float(link_size)
        self.angle_constraint = float(angle_constraint)

        # Laid out straight down (+y) from the origin
        head = as_vec2(origin)
        self.joints: NDArray[np.float64] = np.zeros((joint_count, 2), dtype=np.float64)
        self.joints[:, 0] = head[0]
        self.joints[:, 1] = head[1] + np.arange(joint_count) * self.link_size
        # Angle i points from joint i toward joint i-1: straight up (3pi/2)
        self.angles: NDArray[np.float64] = np.full(
            joint_count, normalize_angle(-math.pi / 2), dtype=np.float64)

        logger.debug("Chain: %d joints, link %.1f, constraint %.3f rad",
                     joint_count, self.link_size, self.angle_constraint)

    # ── Accessors ──

    @property
    def joint_count(self) -> int:
        return len(self.joints)

    @property
    def head(self) -> Vec2:
        return self.joints[0]

    # ── Angle-constrained follow ──

    def resolve(self, target: PointLike) -> None:
        """Snap the head onto *target* and drag the rest of the chain behind it."""
        target = as_vec2(target)
        joints = self.joints
        angles = self.angles

        step = target - joints[0]
        if not is_zero(step):
            angles[0] = normalize_angle(heading(step))
        joints[0] = target

        for i in range(1, len(joints)):
            link = joints[i - 1] - joints[i]
            raw = angles[i - 1] if is_zero(link) else heading(link)
            angles[i] = constrain_angle(raw, angles[i - 1], self.angle_constraint)
            joints[i] = joints[i - 1] - from_angle(angles[i], self.link_size)

    # ── FABRIK ──

    def fabrik_resolve(self, target: PointLike, anchor: PointLike) -> None:
        """Reach the head toward *target* while keeping the tail on *anchor*."""
        self._reach_forward(as_vec2(target))
        self._reach_backward(as_vec2(anchor))

    def _reach_forward(self, target: Vec2) -> None:
        joints = self.joints
        joints[0] = target
        for i in range(1, len(joints)):
            joints[i] = constrain_distance(joints[i], joints[i - 1], self.link_size)

    def _reach_backward(self, anchor: Vec2) -> None:
        joints = self.joints
        joints[-1] = anchor
        for i in range(len(joints) - 2, -1, -1):
            joints[i] = constrain_distance(joints[i], joints[i + 1], self.link_size)

    def __repr__(self) -> str:
        return (f"Chain(joints={self.joint_count}, link_size={self.link_size}, "
                f"angle_constraint={self.angle_constraint:.4f})")
