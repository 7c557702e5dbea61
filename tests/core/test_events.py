"""Tests for event bus."""

from critters.core.events import EventBus, EventType


def test_subscribe_publish():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.POINTER_MOVED, lambda **kw: received.append(kw))
    bus.publish(EventType.POINTER_MOVED, x=10.0, y=20.0)
    assert len(received) == 1
    assert received[0] == {"x": 10.0, "y": 20.0}


def test_unsubscribe():
    bus = EventBus()
    received = []
    handler = lambda **kw: received.append(kw)
    bus.subscribe(EventType.POINTER_MOVED, handler)
    bus.unsubscribe(EventType.POINTER_MOVED, handler)
    bus.publish(EventType.POINTER_MOVED, x=1.0, y=2.0)
    assert len(received) == 0


def test_multiple_subscribers():
    bus = EventBus()
    a, b = [], []
    bus.subscribe(EventType.CREATURE_SELECTED, lambda **kw: a.append(1))
    bus.subscribe(EventType.CREATURE_SELECTED, lambda **kw: b.append(1))
    bus.publish(EventType.CREATURE_SELECTED, index=1, name="Snake")
    assert len(a) == 1
    assert len(b) == 1


def test_different_events_independent():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.POINTER_MOVED, lambda **kw: received.append("pointer"))
    bus.publish(EventType.FRAME_UPDATE, frame=1, dt=0.016)
    assert len(received) == 0


def test_handler_may_unsubscribe_during_publish():
    bus = EventBus()
    calls = []

    def once(**kw):
        calls.append(1)
        bus.unsubscribe(EventType.FRAME_UPDATE, once)

    bus.subscribe(EventType.FRAME_UPDATE, once)
    bus.publish(EventType.FRAME_UPDATE, frame=1, dt=0.0)
    bus.publish(EventType.FRAME_UPDATE, frame=2, dt=0.0)
    assert calls == [1]
