"""Shared creature interface and the spine capability.

Creatures are composed, not subclassed: each owns a ``Spine`` (an
angle-constrained chain plus its body-width profile) and optionally a list
of ``Limb`` objects.  The simulation only relies on the ``Creature``
protocol.
"""

from __future__ import annotations

import math
from typing import Callable, Protocol, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from critters.core.chain import Chain, InvalidConfiguration
from critters.core.math_utils import PointLike, Vec2, from_angle

WidthTable = Union[Sequence[float], Callable[[int], float]]
# A single length offset, or separate (x, y) offsets that squash the point
LengthOffset = Union[float, tuple[float, float]]


class Creature(Protocol):
    name: str
    spine: "Spine"
    limbs: list

    def resolve(self, target: PointLike) -> None: ...

    def render(self, sink) -> None: ...

    def render_debug(self, sink) -> None: ...


class Spine:
    """Angle-constrained body chain with surface sampling.

    ``width`` is either a per-joint table or a function of the joint index.
    Indices past the end of a table reuse its last entry.
    """

    def __init__(self, chain: Chain, width: WidthTable):
        self.chain = chain
        if callable(width):
            self._width_fn = width
        else:
            table = [float(w) for w in width]
            if not table:
                raise InvalidConfiguration("Body width table is empty")
            self._width_fn = lambda i: table[min(i, len(table) - 1)]

    @property
    def joints(self) -> NDArray[np.float64]:
        return self.chain.joints

    @property
    def angles(self) -> NDArray[np.float64]:
        return self.chain.angles

    def width(self, i: int) -> float:
        return self._width_fn(i)

    def surface_point(self, i: int, angle_offset: float, length_offset: LengthOffset = 0.0) -> Vec2:
        """Point at ``angle_offset`` from joint *i*'s heading, ``length_offset`` past the body edge.

        With an ``(x, y)`` pair the radius differs per axis, giving an
        elliptical rather than circular offset.
        """
        if isinstance(length_offset, tuple):
            dx, dy = length_offset
            w = self.width(i)
            unit = from_angle(self.chain.angles[i] + angle_offset)
            return self.chain.joints[i] + unit * (w + dx, w + dy)
        return self.chain.joints[i] + from_angle(
            self.chain.angles[i] + angle_offset, self.width(i) + length_offset)

    def outline(
        self,
        last: int | None = None,
        tail_cap: bool = True,
        snout: tuple[LengthOffset, LengthOffset, LengthOffset] = (0.0, 0.0, 0.0),
    ) -> list[Vec2]:
        """Closed silhouette points for a Catmull-Rom ``curve_shape``.

        Runs down the right side to joint *last*, optionally rounds the tail,
        back up the left side, over the snout, then repeats the first three
        right-side points so the curve closes smoothly.  ``snout`` holds the
        length offsets (scalar or per-axis) of the points at -30, 0 and +30
        degrees off the head.
        """
        if last is None:
            last = self.chain.joint_count - 1
        half = math.pi / 2
        pts = [self.surface_point(i, half) for i in range(last + 1)]
        if tail_cap:
            pts.append(self.surface_point(last, math.pi))
        pts.extend(self.surface_point(i, -half) for i in range(last, -1, -1))
        pts.append(self.surface_point(0, -math.pi / 6, snout[0]))
        pts.append(self.surface_point(0, 0.0, snout[1]))
        pts.append(self.surface_point(0, math.pi / 6, snout[2]))
        pts.extend(self.surface_point(i, half) for i in range(min(3, last + 1)))
        return pts
