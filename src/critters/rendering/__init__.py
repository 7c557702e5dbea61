"""Rendering subsystem -- backend-neutral sink plus a QPainter backend.

``QPainterSink`` is imported from ``critters.rendering.qt_sink`` directly so
that headless code never pulls in Qt.
"""

from critters.rendering.curves import catmull_rom_to_bezier
from critters.rendering.sink import DrawCommand, RecordingSink, RenderSink, Style, draw_chain

__all__ = [
    "DrawCommand",
    "RecordingSink",
    "RenderSink",
    "Style",
    "catmull_rom_to_bezier",
    "draw_chain",
]
