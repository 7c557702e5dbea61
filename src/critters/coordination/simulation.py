"""Per-frame simulation orchestrator."""

import logging
from typing import Optional, Sequence

from critters.core.events import EventBus, EventType
from critters.core.state import SimulationState
from critters.creatures.base import Creature

logger = logging.getLogger(__name__)


class Simulation:
    """Steps the selected creature toward the pointer once per frame.

    Only the current creature is resolved; the others keep whatever pose
    they had when they were deselected and resume from it when picked
    again.
    """

    def __init__(
        self,
        state: SimulationState,
        creatures: Sequence[Creature],
        event_bus: Optional[EventBus] = None,
    ):
        if not creatures:
            raise ValueError("Simulation needs at least one creature")
        self.state = state
        self.creatures = list(creatures)
        self.event_bus = event_bus
        self.state.current_index %= len(self.creatures)

    @property
    def current(self) -> Creature:
        return self.creatures[self.state.current_index]

    def select(self, index: int) -> None:
        index %= len(self.creatures)
        if index == self.state.current_index:
            return
        self.state.current_index = index
        logger.info("Selected %s", self.current.name)
        if self.event_bus is not None:
            self.event_bus.publish(EventType.CREATURE_SELECTED,
                                   index=index, name=self.current.name)

    def cycle(self) -> None:
        self.select(self.state.current_index + 1)

    def toggle_debug(self) -> None:
        self.state.debug_view = not self.state.debug_view
        if self.event_bus is not None:
            self.event_bus.publish(EventType.DEBUG_VIZ_TOGGLED, enabled=self.state.debug_view)

    def step(self, dt: float) -> None:
        """Advance one frame."""
        self.current.resolve(self.state.pointer)
        self.state.record_frame(dt)
        if self.event_bus is not None:
            self.event_bus.publish(EventType.FRAME_UPDATE,
                                   frame=self.state.frame_count, dt=dt)

    def render(self, sink) -> None:
        creature = self.current
        creature.render(sink)
        if self.state.debug_view:
            creature.render_debug(sink)
