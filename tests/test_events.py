from tombgrid.events import (
    EventBus,
    EventDispatcher,
    KeyAction,
    KeyEvent,
    MouseButtonEvent,
    MouseMoveEvent,
    RequestLevelEvent,
)


def test_dispatcher_invokes_subscribers_in_order():
    dispatcher = EventDispatcher()
    seen = []
    dispatcher.subscribe(lambda e: seen.append(("a", e.x)))
    dispatcher.subscribe(lambda e: seen.append(("b", e.x)))
    dispatcher.invoke(MouseMoveEvent(3, 4, 1, 2))
    assert seen == [("a", 3), ("b", 3)]


def test_iadd_returns_same_dispatcher_and_adds():
    dispatcher = EventDispatcher()
    original = dispatcher
    dispatcher += lambda e: None
    assert dispatcher is original
    assert len(dispatcher) == 1


def test_subscriber_can_mark_event_handled():
    dispatcher = EventDispatcher()

    def handle(event):
        event.handled = True

    dispatcher += handle
    event = MouseButtonEvent(1, 1, 0, 1, 0)
    dispatcher.invoke(event)
    assert event.handled is True


def test_invoke_without_subscribers_leaves_event_untouched():
    event = KeyEvent(256, 0, KeyAction.PRESS, 0)
    EventDispatcher().invoke(event)
    assert event.handled is False


def test_bus_routes_by_exact_type():
    bus = EventBus()
    keys = []
    bus.connect(KeyEvent, keys.append)
    bus.trigger(MouseMoveEvent(0, 0, 0, 0))
    key = KeyEvent(290, 0, KeyAction.PRESS, 0)
    bus.trigger(key)
    assert keys == [key]


def test_bus_calls_handlers_in_connection_order():
    bus = EventBus()
    order = []
    bus.connect(RequestLevelEvent, lambda e: order.append("first:" + e.level_name))
    bus.connect(RequestLevelEvent, lambda e: order.append("second:" + e.level_name))
    bus.trigger(RequestLevelEvent("level_1"))
    assert order == ["first:level_1", "second:level_1"]