import logging
import pytest
from enum import Enum, auto
from rpg_engine.core.events import EventBus, Event

class MockEvent(Enum):
    TEST_EVENT = auto()
    OTHER_EVENT = auto()

def test_event_bus_subscribe_publish(event_bus):
    received = []
    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event_bus.publish(MockEvent.TEST_EVENT, data="test")

    assert len(received) == 1
    assert received[0].type == MockEvent.TEST_EVENT
    assert received[0].data["data"] == "test"
    assert received[0]["data"] == "test"
    assert received[0].get("missing", 3) == 3

def test_handlers_run_in_subscription_order(event_bus):
    order = []

    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("first"), weak=False)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("second"), weak=False)

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["first", "second"]

def test_publish_without_subscribers(event_bus):
    event = event_bus.publish(MockEvent.OTHER_EVENT, cue="attack")

    assert isinstance(event, Event)
    assert event["cue"] == "attack"

def test_weak_method_handler_is_dropped():
    bus = EventBus()
    calls = []

    class Listener:
        def on_event(self, event):
            calls.append(event)

    listener = Listener()
    bus.subscribe(MockEvent.TEST_EVENT, listener.on_event)
    bus.publish(MockEvent.TEST_EVENT)
    del listener
    bus.publish(MockEvent.TEST_EVENT)

    assert len(calls) == 1

def test_handler_error_is_logged_and_dispatch_continues(event_bus, caplog):
    received = []

    def broken(event):
        raise ValueError("boom")

    def healthy(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, broken)
    event_bus.subscribe(MockEvent.TEST_EVENT, healthy)

    with caplog.at_level(logging.ERROR, logger="rpg_engine.core.events"):
        event_bus.publish(MockEvent.TEST_EVENT)

    assert len(received) == 1
    assert "Error in event handler" in caplog.text

def test_events_published_during_dispatch_are_queued(event_bus):
    order = []

    def first(event):
        order.append("test")
        event_bus.publish(MockEvent.OTHER_EVENT)
        order.append("test done")

    def second(event):
        order.append("other")

    event_bus.subscribe(MockEvent.TEST_EVENT, first)
    event_bus.subscribe(MockEvent.OTHER_EVENT, second)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["test", "test done", "other"]
