"""EventBus for decoupled publish/subscribe communication."""

from collections import defaultdict
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    # Input
    POINTER_MOVED = auto()        # data: x (float), y (float)
    VIEWPORT_RESIZED = auto()     # data: width (int), height (int)

    # Selection
    CREATURE_SELECTED = auto()    # data: index (int), name (str)

    # Debug visualization
    DEBUG_VIZ_TOGGLED = auto()    # data: enabled (bool)

    # Frame events
    FRAME_UPDATE = auto()         # data: frame (int), dt (float)


class EventBus:
    """Simple publish/subscribe event system."""

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> None:
        for handler in list(self._handlers[event_type]):
            handler(**data)
