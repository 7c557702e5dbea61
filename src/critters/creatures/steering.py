"""Head steering: how far the head moves toward the pointer each frame."""

from critters.core.angle_math import normalize_angle, relative_angle_diff
from critters.core.math_utils import PointLike, Vec2, as_vec2, clamp, distance, from_angle, heading, set_mag


def step_toward(head: PointLike, target: PointLike, step: float) -> Vec2:
    """Move *step* units from *head* toward *target* (no move if they coincide)."""
    head = as_vec2(head)
    return head + set_mag(as_vec2(target) - head, step)


class HeadSteering:
    """Turn-rate limited steering with a dead zone.

    The remembered heading may change by at most ``max_turn`` per frame,
    independent of the spine's own angle constraint.  Inside ``dead_zone``
    the head does not move at all, which keeps a resting creature still.
    """

    def __init__(self, step: float, max_turn: float, dead_zone: float,
                 initial_heading: float = 0.0):
        self.step = step
        self.max_turn = max_turn
        self.dead_zone = dead_zone
        self.heading = initial_heading

    def next_target(self, head: PointLike, pointer: PointLike) -> Vec2 | None:
        """Where the head should go this frame, or ``None`` to stay put."""
        head = as_vec2(head)
        pointer = as_vec2(pointer)
        if distance(head, pointer) < self.dead_zone:
            return None

        desired = heading(pointer - head)
        turn = relative_angle_diff(self.heading, desired)
        self.heading = normalize_angle(
            self.heading + clamp(turn, -self.max_turn, self.max_turn))
        return head + from_angle(self.heading, self.step)
