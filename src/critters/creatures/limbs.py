"""Legs: a FABRIK chain hung off the spine with discrete stepping."""

import math

from critters.core.chain import Chain
from critters.core.math_utils import PointLike, Vec2, distance, lerp_vec2, perpendicular, set_mag, vec2
from critters.creatures.base import Spine
from critters.creatures.config import LimbConfig


class Limb:
    """One leg of a walking creature.

    The chain runs foot (joint 0) to shoulder (last joint).  The foot chases
    a remembered *desired* position that only jumps to the ideal spot once
    the body has carried it more than ``step_threshold`` away, so the feet
    plant and step instead of sliding.
    """

    def __init__(self, origin: PointLike, config: LimbConfig):
        self.config = config
        self.chain = Chain(origin, config.joint_count, config.link_size)
        self.desired: Vec2 = vec2(0.0, 0.0)

    @property
    def foot(self) -> Vec2:
        return self.chain.joints[0]

    @property
    def shoulder(self) -> Vec2:
        return self.chain.joints[-1]

    def ideal_foot(self, spine: Spine) -> Vec2:
        cfg = self.config
        return spine.surface_point(cfg.body_index, cfg.foot_angle * cfg.side, cfg.reach_offset)

    def anchor(self, spine: Spine) -> Vec2:
        cfg = self.config
        return spine.surface_point(cfg.body_index, math.pi / 2 * cfg.side, cfg.shoulder_offset)

    def update(self, spine: Spine) -> bool:
        """Advance the leg one frame.  Returns True when a new step was taken."""
        cfg = self.config
        ideal = self.ideal_foot(spine)
        stepped = distance(ideal, self.desired) > cfg.step_threshold
        if stepped:
            self.desired = ideal

        foot = lerp_vec2(self.chain.joints[0], self.desired, cfg.foot_blend)
        self.chain.fabrik_resolve(foot, self.anchor(spine))
        return stepped

    def elbow(self) -> Vec2:
        """Middle joint, optionally pushed sideways for drawing."""
        mid = self.chain.joints[len(self.chain.joints) // 2].copy()
        if self.config.elbow_bias:
            mid += set_mag(perpendicular(self.foot - self.shoulder), self.config.elbow_bias)
        return mid
