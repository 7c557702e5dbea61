"""Fish: a free swimmer with turn-rate limited steering and animated fins."""

from __future__ import annotations

import math
from typing import Optional

from critters.constants import OUTLINE_COLOR, OUTLINE_WIDTH
from critters.core.angle_math import relative_angle_diff
from critters.core.chain import Chain, InvalidConfiguration
from critters.core.math_utils import PointLike, clamp, from_angle
from critters.creatures.base import Spine
from critters.creatures.config import FishConfig
from critters.creatures.steering import HeadSteering
from critters.rendering.sink import Style, draw_chain

HALF_PI = math.pi / 2

# Vertebrae 0-9 carry the body, the last two only the caudal fin
_BODY_END = 9
_CAUDAL_START = 8


class Fish:
    """Spine-only creature steered by ``HeadSteering``."""

    name = "Fish"

    def __init__(self, origin: PointLike, config: Optional[FishConfig] = None):
        self.config = config or FishConfig()
        cfg = self.config
        if cfg.joint_count <= _BODY_END:
            raise InvalidConfiguration(
                f"Fish needs more than {_BODY_END} joints, got {cfg.joint_count}")
        self.spine = Spine(Chain(origin, cfg.joint_count, cfg.link_size, cfg.angle_constraint),
                           cfg.body_width)
        self.limbs: list = []
        self.steering = HeadSteering(cfg.step, cfg.max_turn, cfg.dead_zone)

    @property
    def spine_joints(self):
        return self.spine.joints

    @property
    def spine_angles(self):
        return self.spine.angles

    def resolve(self, target: PointLike) -> None:
        head_target = self.steering.next_target(self.spine.chain.head, target)
        if head_target is None:
            return
        self.spine.chain.resolve(head_target)

    def curvature(self) -> tuple[float, float, float]:
        """Signed bend from the head to the middle (joints 6, 7) and to the tail.

        Head-to-tail can exceed pi on a tight curl, where a direct relative
        difference would flip sign, so it is summed through the middle.
        """
        a = self.spine.angles
        mid = len(a) // 2
        head_to_mid1 = relative_angle_diff(a[0], a[mid])
        head_to_mid2 = relative_angle_diff(a[0], a[mid + 1])
        head_to_tail = head_to_mid1 + relative_angle_diff(a[mid], a[-1])
        return head_to_mid1, head_to_mid2, head_to_tail

    def render(self, sink) -> None:
        cfg = self.config
        s = self.spine
        j = s.joints
        a = s.angles
        head_to_mid1, head_to_mid2, head_to_tail = self.curvature()
        fin = Style(fill=cfg.fin_color, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)
        body = Style(fill=cfg.body_color, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)

        # Pectoral fins
        for side in (1, -1):
            sink.ellipse(s.surface_point(3, side * math.pi / 3), 160, 64,
                         a[2] - side * math.pi / 4, fin)

        # Ventral fins
        for side in (1, -1):
            sink.ellipse(s.surface_point(7, side * HALF_PI), 96, 32,
                         a[6] - side * math.pi / 4, fin)

        # Caudal fin: flares with the overall bend
        last = len(j) - 1
        caudal = []
        for i in range(_CAUDAL_START, last + 1):
            w = 1.5 * head_to_tail * (i - _CAUDAL_START) ** 2
            caudal.append(j[i] + from_angle(a[i] - HALF_PI, w))
        top = clamp(head_to_tail * 6, -13, 13)
        for i in range(last, _CAUDAL_START - 1, -1):
            caudal.append(j[i] + from_angle(a[i] + HALF_PI, top))
        sink.curve_shape(caudal, fin)

        sink.curve_shape(s.outline(last=_BODY_END, snout=(0.0, 4.0, 0.0)), body)

        # Dorsal fin
        sink.bezier_shape(j[4], [
            (j[5], j[6], j[7]),
            (j[6] + from_angle(a[6] + HALF_PI, head_to_mid2 * 16),
             j[5] + from_angle(a[5] + HALF_PI, head_to_mid1 * 16),
             j[4]),
        ], fin)

        eye = Style(fill=OUTLINE_COLOR, stroke=OUTLINE_COLOR, stroke_width=OUTLINE_WIDTH)
        for side in (1, -1):
            sink.ellipse(s.surface_point(0, side * HALF_PI, -18), 24, 24, 0.0, eye)

    def render_debug(self, sink) -> None:
        draw_chain(self.spine.chain, sink)
