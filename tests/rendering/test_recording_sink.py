"""Tests for the in-memory render sink and chain debug drawing."""

import numpy as np

from critters.core.chain import Chain
from critters.rendering.sink import RecordingSink, Style, draw_chain


def test_records_primitives_in_order():
    sink = RecordingSink()
    style = Style(fill=(1, 2, 3))
    sink.ellipse((1, 2), 10, 5, 0.5, style)
    sink.line((0, 0), (3, 4), style)
    sink.bezier_shape((0, 0), [((1, 1), (2, 2), (3, 3))], style)
    sink.text((5, 5), "hi", 12, (255, 255, 255))

    assert [c.kind for c in sink.commands] == ["ellipse", "line", "bezier_shape", "text"]
    ellipse = sink.commands[0]
    assert ellipse.params == {"width": 10, "height": 5, "rotation": 0.5}
    assert ellipse.style is style
    assert len(sink.commands[2].points) == 4
    assert sink.commands[3].params["text"] == "hi"


def test_all_points_and_clear():
    sink = RecordingSink()
    assert sink.all_points().shape == (0, 2)
    sink.curve_shape([(0, 0), (1, 1), (2, 0)], Style())
    sink.bezier_stroke((0, 0), (1, 0), (2, 0), (3, 0), Style())
    assert sink.all_points().shape == (7, 2)
    assert sink.of_kind("curve_shape")[0].params["closed"] is True
    sink.clear()
    assert sink.commands == []


def test_draw_chain():
    chain = Chain((0, 0), 4, 10)
    sink = RecordingSink()
    draw_chain(chain, sink)
    lines = sink.of_kind("line")
    joints = sink.of_kind("ellipse")
    assert len(lines) == 3
    assert len(joints) == 4
    np.testing.assert_array_equal(lines[0].points[1], [0, 10])
    np.testing.assert_array_equal(joints[3].points[0], [0, 30])
