"""Snake: a long spine that slithers straight at the pointer."""

from __future__ import annotations

import math
from typing import Optional

from critters.constants import OUTLINE_COLOR, OUTLINE_WIDTH
from critters.core.chain import Chain
from critters.core.math_utils import PointLike
from critters.creatures.base import Spine
from critters.creatures.config import SnakeConfig
from critters.creatures.steering import step_toward
from critters.rendering.sink import Style, draw_chain


class Snake:
    name = "Snake"

    def __init__(self, origin: PointLike, config: Optional[SnakeConfig] = None):
        self.config = config or SnakeConfig()
        cfg = self.config
        chain = Chain(origin, cfg.joint_count, cfg.link_size, cfg.angle_constraint)
        self.spine = Spine(chain, self.body_width)
        self.limbs: list = []

    @property
    def spine_joints(self):
        return self.spine.joints

    @property
    def spine_angles(self):
        return self.spine.angles

    def body_width(self, i: int) -> float:
        """Explicit head widths, then a linear taper toward the tail."""
        head = self.config.head_widths
        if i < len(head):
            return float(head[i])
        return self.config.taper_base - i

    def resolve(self, target: PointLike) -> None:
        head = self.spine.chain.head
        self.spine.chain.resolve(step_toward(head, target, self.config.step))

    def render(self, sink) -> None:
        s = self.spine
        body = Style(fill=self.config.body_color, stroke=OUTLINE_COLOR,
                     stroke_width=OUTLINE_WIDTH)
        sink.curve_shape(s.outline(), body)

        eye = Style(fill=OUTLINE_COLOR, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)
        for side in (1, -1):
            sink.ellipse(s.surface_point(0, side * math.pi / 2, -18), 24, 24, 0.0, eye)

    def render_debug(self, sink) -> None:
        draw_chain(self.spine.chain, sink)
