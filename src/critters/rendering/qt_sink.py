"""QPainter implementation of the render sink."""

import math

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen

from critters.rendering.curves import catmull_rom_to_bezier
from critters.rendering.sink import Color, Style


def _qcolor(color: Color) -> QColor:
    return QColor(*color)


def _qpoint(p) -> QPointF:
    return QPointF(float(p[0]), float(p[1]))


class QPainterSink:
    """Draws sink primitives onto an active ``QPainter``."""

    def __init__(self, painter: QPainter):
        self._painter = painter
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def _apply(self, style: Style) -> None:
        p = self._painter
        if style.stroke is None:
            p.setPen(Qt.PenStyle.NoPen)
        else:
            pen = QPen(_qcolor(style.stroke))
            pen.setWidthF(style.stroke_width)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
            p.setPen(pen)
        if style.fill is None:
            p.setBrush(Qt.BrushStyle.NoBrush)
        else:
            p.setBrush(QBrush(_qcolor(style.fill)))

    def ellipse(self, center, width, height, rotation, style) -> None:
        p = self._painter
        self._apply(style)
        p.save()
        p.translate(_qpoint(center))
        p.rotate(math.degrees(rotation))
        p.drawEllipse(QPointF(0.0, 0.0), width / 2.0, height / 2.0)
        p.restore()

    def curve_shape(self, points, style, closed=True) -> None:
        segments = catmull_rom_to_bezier(points)
        if not segments:
            return
        path = QPainterPath(_qpoint(segments[0][0]))
        for _, c1, c2, end in segments:
            path.cubicTo(_qpoint(c1), _qpoint(c2), _qpoint(end))
        if closed:
            path.closeSubpath()
        self._apply(style)
        self._painter.drawPath(path)

    def bezier_shape(self, start, segments, style) -> None:
        path = QPainterPath(_qpoint(start))
        for c1, c2, end in segments:
            path.cubicTo(_qpoint(c1), _qpoint(c2), _qpoint(end))
        self._apply(style)
        self._painter.drawPath(path)

    def bezier_stroke(self, p0, c1, c2, p3, style) -> None:
        path = QPainterPath(_qpoint(p0))
        path.cubicTo(_qpoint(c1), _qpoint(c2), _qpoint(p3))
        self._apply(Style(fill=None, stroke=style.stroke, stroke_width=style.stroke_width))
        self._painter.drawPath(path)

    def line(self, a, b, style) -> None:
        self._apply(style)
        self._painter.drawLine(_qpoint(a), _qpoint(b))

    def text(self, pos, text, size, color) -> None:
        p = self._painter
        p.setPen(QPen(_qcolor(color)))
        p.setFont(QFont("sans-serif", int(size)))
        p.drawText(_qpoint(pos), text)
