"""Tests for math_utils module."""

import math

import numpy as np
import pytest

from critters.core.math_utils import (
    as_vec2, clamp, distance, from_angle, heading, is_zero, length,
    lerp_vec2, normalize, perpendicular, set_mag, vec2,
)


def test_vec2():
    v = vec2(1, 2)
    assert v.shape == (2,)
    assert v.dtype == np.float64
    np.testing.assert_array_equal(v, [1, 2])


def test_as_vec2_copies():
    src = np.array([3.0, 4.0])
    v = as_vec2(src)
    v[0] = 99.0
    assert src[0] == 3.0
    np.testing.assert_array_equal(as_vec2((5, 6)), [5.0, 6.0])


def test_length_and_distance():
    assert length(vec2(3, 4)) == 5.0
    assert distance(vec2(1, 1), vec2(4, 5)) == 5.0


def test_heading():
    assert heading(vec2(1, 0)) == 0.0
    assert heading(vec2(0, 1)) == pytest.approx(math.pi / 2)
    assert heading(vec2(-1, 0)) == pytest.approx(math.pi)


def test_from_angle():
    np.testing.assert_array_almost_equal(from_angle(0.0), [1, 0])
    np.testing.assert_array_almost_equal(from_angle(math.pi / 2, 3.0), [0, 3])


def test_normalize():
    np.testing.assert_array_almost_equal(normalize(vec2(3, 0)), [1, 0])


def test_normalize_zero():
    np.testing.assert_array_equal(normalize(vec2(0, 0)), [0, 0])
    assert is_zero(vec2(0, 0))


def test_set_mag():
    np.testing.assert_array_almost_equal(set_mag(vec2(3, 4), 10), [6, 8])
    np.testing.assert_array_equal(set_mag(vec2(0, 0), 10), [0, 0])


def test_perpendicular():
    np.testing.assert_array_equal(perpendicular(vec2(1, 0)), [0, 1])
    np.testing.assert_array_equal(perpendicular(vec2(2, 3)), [-3, 2])


def test_lerp_vec2():
    np.testing.assert_array_almost_equal(lerp_vec2(vec2(0, 0), vec2(10, 20), 0.4), [4, 8])


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
