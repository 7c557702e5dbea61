"""Tests for spine surface sampling and silhouettes."""

import math

import numpy as np
import pytest

from critters.core.chain import Chain, InvalidConfiguration
from critters.creatures.base import Spine


def _spine(widths=(10.0, 20.0, 30.0)):
    chain = Chain((0.0, 0.0), 3, 50.0)
    chain.angles[:] = 0.0
    return Spine(chain, list(widths))


def test_width_table_reuses_last_entry():
    spine = Spine(Chain((0.0, 0.0), 5, 10.0), [4, 6])
    assert spine.width(1) == 6
    assert spine.width(4) == 6


def test_empty_width_table_rejected():
    with pytest.raises(InvalidConfiguration):
        Spine(Chain((0.0, 0.0), 2, 10.0), [])


def test_surface_point_scalar_offset():
    spine = _spine()
    np.testing.assert_array_almost_equal(spine.surface_point(0, 0.0, 5.0), [15.0, 0.0])
    np.testing.assert_array_almost_equal(spine.surface_point(1, math.pi / 2), [0.0, 70.0])


def test_surface_point_per_axis_offset():
    spine = _spine()
    np.testing.assert_array_almost_equal(spine.surface_point(0, 0.0, (-2.0, -4.0)), [8.0, 0.0])
    np.testing.assert_array_almost_equal(
        spine.surface_point(0, math.pi / 2, (-2.0, -4.0)), [0.0, 6.0])


def test_outline_without_tail_cap():
    spine = _spine()
    pts = spine.outline(tail_cap=False)
    assert len(pts) == 3 + 3 + 3 + 3
    np.testing.assert_array_almost_equal(pts[-3], pts[0])
