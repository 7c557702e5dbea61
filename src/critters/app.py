"""critters application entry point.

Wires together config loading, the creature roster, the simulation and the
Qt viewport, then drives everything from a QTimer.
"""

import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from critters.constants import DEFAULT_WINDOW_SIZE, TARGET_FPS
from critters.coordination.scene_builder import build_creatures
from critters.coordination.simulation import Simulation
from critters.core.clock import DeltaClock
from critters.core.events import EventBus, EventType
from critters.core.state import SimulationState
from critters.creatures.config import load_creature_configs
from critters.ui.viewport import CreatureViewport

logger = logging.getLogger(__name__)


def main():
    """Launch the critters window."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    app = QApplication(sys.argv)

    # Core systems
    event_bus = EventBus()
    state = SimulationState()
    state.set_viewport_size(*DEFAULT_WINDOW_SIZE)
    state.set_pointer(*state.viewport_center)
    clock = DeltaClock()

    configs = load_creature_configs()
    creatures = build_creatures(state.viewport_center, configs)
    simulation = Simulation(state, creatures, event_bus)

    viewport = CreatureViewport(simulation, event_bus)

    # ── Event wiring ──
    def on_pointer_moved(x: float = 0.0, y: float = 0.0, **kw):
        state.set_pointer(x, y)

    def on_viewport_resized(width: int = 0, height: int = 0, **kw):
        state.set_viewport_size(width, height)

    def on_creature_selected(index: int = 0, name: str = "", **kw):
        viewport.update()

    event_bus.subscribe(EventType.POINTER_MOVED, on_pointer_moved)
    event_bus.subscribe(EventType.VIEWPORT_RESIZED, on_viewport_resized)
    event_bus.subscribe(EventType.CREATURE_SELECTED, on_creature_selected)

    # ── Frame loop ──
    def tick():
        simulation.step(clock.get_delta())
        viewport.update()

    timer = QTimer()
    timer.timeout.connect(tick)
    timer.start(int(1000 / TARGET_FPS))

    viewport.resize(*DEFAULT_WINDOW_SIZE)
    viewport.show()
    clock.reset()
    logger.info("Running at %d fps target; %s first", TARGET_FPS, simulation.current.name)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
