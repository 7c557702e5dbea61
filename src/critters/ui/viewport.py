"""QPainter viewport: draws the active creature and forwards input."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from critters.constants import BACKGROUND_COLOR
from critters.coordination.simulation import Simulation
from critters.core.events import EventBus, EventType
from critters.rendering.qt_sink import QPainterSink

_TEXT_COLOR = (255, 255, 255)

_SELECT_KEYS = {
    Qt.Key.Key_1: 0,
    Qt.Key.Key_2: 1,
    Qt.Key.Key_3: 2,
}


class CreatureViewport(QWidget):
    """Full-window canvas.

    Mouse movement steers, a click cycles creatures, keys 1-3 pick one
    directly and D toggles the spine debug view.
    """

    def __init__(self, simulation: Simulation, event_bus: EventBus, parent=None):
        super().__init__(parent)
        self._sim = simulation
        self._bus = event_bus
        self._background = QColor(*BACKGROUND_COLOR)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setWindowTitle("critters")

    # ── Paint ──

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        sink = QPainterSink(painter)
        self._sim.render(sink)
        self._draw_overlay(sink)
        painter.end()

    def _draw_overlay(self, sink: QPainterSink) -> None:
        names = ", ".join(f"{i + 1}={c.name}" for i, c in enumerate(self._sim.creatures))
        sink.text((20, 44), f"Current creature: {self._sim.current.name}", 24, _TEXT_COLOR)
        sink.text((20, 72), "Click to switch | move the mouse to steer", 16, _TEXT_COLOR)
        sink.text((20, 97), f"Keys: {names}, D=debug view", 16, _TEXT_COLOR)
        if self._sim.state.debug_view:
            sink.text((20, 122), f"{self._sim.state.fps:.0f} fps", 16, _TEXT_COLOR)

    # ── Input ──

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self._bus.publish(EventType.POINTER_MOVED, x=pos.x(), y=pos.y())

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._sim.cycle()
        else:
            super().mousePressEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = event.key()
        if key in _SELECT_KEYS and _SELECT_KEYS[key] < len(self._sim.creatures):
            self._sim.select(_SELECT_KEYS[key])
        elif key == Qt.Key.Key_D:
            self._sim.toggle_debug()
        else:
            super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self._bus.publish(EventType.VIEWPORT_RESIZED, width=size.width(), height=size.height())
        super().resizeEvent(event)
