"""Lizard: spine plus four FABRIK legs that plant and step."""

from __future__ import annotations

import logging
import math
from typing import Optional

from critters.constants import OUTLINE_COLOR, OUTLINE_WIDTH
from critters.core.chain import Chain, InvalidConfiguration
from critters.core.math_utils import PointLike
from critters.creatures.base import Spine
from critters.creatures.config import LizardConfig
from critters.creatures.limbs import Limb
from critters.creatures.steering import step_toward
from critters.rendering.sink import Style, draw_chain

logger = logging.getLogger(__name__)

_LEG_OUTLINE_WIDTH = 40.0
_LEG_FILL_WIDTH = 32.0


class Lizard:
    name = "Lizard"

    def __init__(self, origin: PointLike, config: Optional[LizardConfig] = None):
        self.config = config or LizardConfig()
        cfg = self.config
        self.spine = Spine(Chain(origin, cfg.joint_count, cfg.link_size, cfg.angle_constraint),
                           cfg.body_width)
        for limb_cfg in cfg.limbs:
            if not 0 <= limb_cfg.body_index < cfg.joint_count:
                raise InvalidConfiguration(
                    f"Limb attached at joint {limb_cfg.body_index}, "
                    f"spine has {cfg.joint_count}")
        self.limbs = [Limb(origin, limb_cfg) for limb_cfg in cfg.limbs]
        self.steps_taken = 0

    @property
    def spine_joints(self):
        return self.spine.joints

    @property
    def spine_angles(self):
        return self.spine.angles

    def resolve(self, target: PointLike) -> None:
        head = self.spine.chain.head
        self.spine.chain.resolve(step_toward(head, target, self.config.step))
        for idx, limb in enumerate(self.limbs):
            if limb.update(self.spine):
                self.steps_taken += 1
                logger.debug("Leg %d stepped to (%.0f, %.0f)", idx, *limb.desired)

    def render(self, sink) -> None:
        s = self.spine
        color = self.config.body_color

        # Legs first so the body covers the shoulders
        leg_outline = Style(stroke=OUTLINE_COLOR, stroke_width=_LEG_OUTLINE_WIDTH)
        leg_fill = Style(stroke=color, stroke_width=_LEG_FILL_WIDTH)
        for limb in self.limbs:
            shoulder, foot, elbow = limb.shoulder, limb.foot, limb.elbow()
            sink.bezier_stroke(shoulder, elbow, elbow, foot, leg_outline)
            sink.bezier_stroke(shoulder, elbow, elbow, foot, leg_fill)

        body = Style(fill=color, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)
        snout = ((-8.0, -10.0), (-6.0, -4.0), (-8.0, -10.0))
        sink.curve_shape(s.outline(tail_cap=False, snout=snout), body)

        eye = Style(fill=OUTLINE_COLOR, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)
        for side in (1, -1):
            sink.ellipse(s.surface_point(0, side * 3 * math.pi / 5, -7), 24, 24, 0.0, eye)

    def render_debug(self, sink) -> None:
        draw_chain(self.spine.chain, sink)
        for limb in self.limbs:
            draw_chain(limb.chain, sink)
