"""Tests for the fish controller."""

import math

import numpy as np
import pytest

from critters.core.angle_math import relative_angle_diff
from critters.core.chain import InvalidConfiguration
from critters.creatures.config import FishConfig
from critters.creatures.fish import Fish
from critters.rendering.sink import RecordingSink


def test_default_geometry():
    fish = Fish((400, 300))
    assert fish.spine.chain.joint_count == 12
    assert fish.spine.chain.link_size == 64
    assert fish.spine.chain.angle_constraint == pytest.approx(math.pi / 8)
    assert fish.limbs == []
    assert fish.spine.width(0) == 68
    np.testing.assert_array_equal(fish.spine_joints[0], [400, 300])


def test_swims_one_step_toward_pointer():
    fish = Fish((0, 0))
    fish.resolve((500, 0))
    np.testing.assert_array_almost_equal(fish.spine_joints[0], [16, 0])


def test_dead_zone_keeps_fish_still():
    fish = Fish((0, 0))
    before = fish.spine_joints.copy()
    fish.resolve((10, -10))
    np.testing.assert_array_equal(fish.spine_joints, before)


def test_spine_constraints_hold_while_chasing():
    fish = Fish((400, 300))
    for k in range(400):
        t = k * 0.05
        fish.resolve((400 + 250 * math.cos(t), 300 + 250 * math.sin(2 * t)))
        a = fish.spine_angles
        for i in range(1, len(a)):
            assert abs(relative_angle_diff(a[i], a[i - 1])) <= math.pi / 8 + 1e-9
        d = np.linalg.norm(np.diff(fish.spine_joints, axis=0), axis=1)
        np.testing.assert_allclose(d, 64.0, rtol=1e-9)


def test_curvature_straight_is_zero():
    fish = Fish((0, 0))
    assert fish.curvature() == (0.0, 0.0, 0.0)


def test_curvature_sign_follows_bend():
    fish = Fish((0, 0))
    # Straighten out swimming right
    for _ in range(300):
        fish.resolve((fish.spine_joints[0][0] + 1000, 0))
    np.testing.assert_allclose(fish.curvature(), 0.0, atol=1e-6)

    # Then curve toward +y (increasing heading)
    for k in range(1, 16):
        head = fish.spine_joints[0]
        fish.resolve((head[0] + 100 * math.cos(k * 0.1), head[1] + 100 * math.sin(k * 0.1)))
    head_to_mid1, head_to_mid2, head_to_tail = fish.curvature()
    assert head_to_mid1 < 0
    assert head_to_mid2 < 0
    assert head_to_tail < 0


def test_render_primitives():
    fish = Fish((300, 300))
    fish.resolve((600, 300))
    sink = RecordingSink()
    fish.render(sink)
    assert len(sink.of_kind("ellipse")) == 6       # 2 pectoral, 2 ventral, 2 eyes
    assert len(sink.of_kind("curve_shape")) == 2   # caudal fin, body
    assert len(sink.of_kind("bezier_shape")) == 1  # dorsal fin
    assert np.all(np.isfinite(sink.all_points()))


def test_render_debug_draws_spine():
    fish = Fish((0, 0))
    sink = RecordingSink()
    fish.render_debug(sink)
    assert len(sink.of_kind("line")) == 11
    assert len(sink.of_kind("ellipse")) == 12


def test_too_short_spine_rejected():
    with pytest.raises(InvalidConfiguration):
        Fish((0, 0), FishConfig(joint_count=8))
