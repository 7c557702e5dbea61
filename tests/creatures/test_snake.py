"""Tests for the snake controller."""

import math

import numpy as np
import pytest

from critters.creatures.snake import Snake
from critters.rendering.sink import RecordingSink


def test_body_width_profile():
    snake = Snake((0, 0))
    assert snake.spine.width(0) == 76
    assert snake.spine.width(1) == 80
    assert snake.spine.width(2) == 62
    assert snake.spine.width(47) == 17


def test_head_steps_toward_pointer():
    snake = Snake((0, 0))
    snake.resolve((0, -100))
    np.testing.assert_array_almost_equal(snake.spine_joints[0], [0, -8])
    assert snake.spine_angles[0] == pytest.approx(3 * math.pi / 2)


def test_pointer_on_head_does_not_move():
    snake = Snake((10, 10))
    before = snake.spine_joints.copy()
    snake.resolve((10, 10))
    np.testing.assert_allclose(snake.spine_joints, before, atol=1e-9)


def test_long_chain_stays_rigid():
    snake = Snake((0, 0))
    for k in range(300):
        snake.resolve((300 * math.cos(k * 0.03), 300 * math.sin(k * 0.05)))
    d = np.linalg.norm(np.diff(snake.spine_joints, axis=0), axis=1)
    np.testing.assert_allclose(d, 64.0, rtol=1e-9)


def test_outline_and_render():
    snake = Snake((0, 0))
    # right side + tail cap + left side + snout + overlap
    assert len(snake.spine.outline()) == 48 + 1 + 48 + 3 + 3

    sink = RecordingSink()
    snake.render(sink)
    assert len(sink.of_kind("curve_shape")) == 1
    assert len(sink.of_kind("ellipse")) == 2
