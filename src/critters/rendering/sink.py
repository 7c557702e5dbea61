"""Backend-neutral drawing primitives.

Creatures describe themselves as a stream of primitive calls on a
``RenderSink``.  ``QPainterSink`` turns them into Qt paint calls;
``RecordingSink`` keeps them in memory for tests and headless tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

import numpy as np

from critters.constants import (
    DEBUG_JOINT_DIAMETER,
    DEBUG_JOINT_FILL,
    DEBUG_LINK_WIDTH,
    OUTLINE_COLOR,
)
from critters.core.math_utils import PointLike, Vec2, as_vec2

Color = tuple[int, ...]  # (r, g, b) or (r, g, b, a), 0-255


@dataclass(frozen=True)
class Style:
    """Fill and stroke for one primitive.  ``None`` disables that part."""
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_width: float = 1.0


BezierSegment = tuple[PointLike, PointLike, PointLike]  # (control1, control2, end)


class RenderSink(Protocol):
    def ellipse(self, center: PointLike, width: float, height: float,
                rotation: float, style: Style) -> None: ...

    def curve_shape(self, points: Sequence[PointLike], style: Style,
                    closed: bool = True) -> None: ...

    def bezier_shape(self, start: PointLike, segments: Sequence[BezierSegment],
                     style: Style) -> None: ...

    def bezier_stroke(self, p0: PointLike, c1: PointLike, c2: PointLike,
                      p3: PointLike, style: Style) -> None: ...

    def line(self, a: PointLike, b: PointLike, style: Style) -> None: ...

    def text(self, pos: PointLike, text: str, size: float, color: Color) -> None: ...


@dataclass
class DrawCommand:
    """One recorded primitive."""
    kind: str
    style: Optional[Style] = None
    points: list[Vec2] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)


class RecordingSink:
    """Sink that stores every primitive as a ``DrawCommand``."""

    def __init__(self):
        self.commands: list[DrawCommand] = []

    def ellipse(self, center, width, height, rotation, style) -> None:
        self.commands.append(DrawCommand(
            "ellipse", style, [as_vec2(center)],
            {"width": width, "height": height, "rotation": rotation},
        ))

    def curve_shape(self, points, style, closed=True) -> None:
        self.commands.append(DrawCommand(
            "curve_shape", style, [as_vec2(p) for p in points], {"closed": closed},
        ))

    def bezier_shape(self, start, segments, style) -> None:
        pts = [as_vec2(start)]
        for c1, c2, end in segments:
            pts.extend((as_vec2(c1), as_vec2(c2), as_vec2(end)))
        self.commands.append(DrawCommand("bezier_shape", style, pts))

    def bezier_stroke(self, p0, c1, c2, p3, style) -> None:
        self.commands.append(DrawCommand(
            "bezier_stroke", style, [as_vec2(p) for p in (p0, c1, c2, p3)],
        ))

    def line(self, a, b, style) -> None:
        self.commands.append(DrawCommand("line", style, [as_vec2(a), as_vec2(b)]))

    def text(self, pos, text, size, color) -> None:
        self.commands.append(DrawCommand(
            "text", Style(fill=color), [as_vec2(pos)], {"text": text, "size": size},
        ))

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.kind == kind]

    def all_points(self) -> np.ndarray:
        """Every recorded point stacked into an (N, 2) array."""
        pts = [p for c in self.commands for p in c.points]
        if not pts:
            return np.zeros((0, 2), dtype=np.float64)
        return np.vstack(pts)

    def clear(self) -> None:
        self.commands.clear()


_LINK_STYLE = Style(stroke=OUTLINE_COLOR, stroke_width=DEBUG_LINK_WIDTH)
_JOINT_STYLE = Style(fill=DEBUG_JOINT_FILL, stroke=OUTLINE_COLOR,
                     stroke_width=DEBUG_LINK_WIDTH)


def draw_chain(chain, sink: RenderSink) -> None:
    """Draw a chain's links as lines and its joints as circles."""
    joints = chain.joints
    for i in range(len(joints) - 1):
        sink.line(joints[i], joints[i + 1], _LINK_STYLE)
    for joint in joints:
        sink.ellipse(joint, DEBUG_JOINT_DIAMETER, DEBUG_JOINT_DIAMETER, 0.0, _JOINT_STYLE)
