"""Input and game events, and the dispatchers that deliver them."""

from __future__ import annotations

import enum
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

KEY_ESCAPE = 256
KEY_F1 = 290
KEY_F2 = 291
KEY_F3 = 292

MOUSE_BUTTON_LEFT = 0
MOUSE_PRESS = 0
MOUSE_RELEASE = 1


class KeyAction(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class KeyEvent:
    key: int
    scancode: int
    action: KeyAction
    mods: int
    handled: bool = False


@dataclass
class MouseMoveEvent:
    x: float
    y: float
    last_x: float
    last_y: float
    handled: bool = False


@dataclass
class MouseButtonEvent:
    x: float
    y: float
    button: int
    action: int
    mods: int
    handled: bool = False


@dataclass
class MouseScrollEvent:
    x_offset: float
    y_offset: float
    handled: bool = False


@dataclass
class FramebufferSizeEvent:
    width: float
    height: float
    handled: bool = False


class OskEvent(enum.Enum):
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_FORWARD = "forward"
    MOVE_BACKWARD = "backward"
    INTERACT = "interact"


@dataclass
class OskMoveRequested:
    event: OskEvent


@dataclass
class ResourceUpdatedEvent:
    resource_id: str = ""


@dataclass
class CameraUpdateEvent:
    pass


@dataclass
class OnLevelSpawned:
    pass


@dataclass
class RequestLevelEvent:
    level_name: str


@dataclass
class RequestLevelRestart:
    pass


@dataclass
class OnLaraDiedEvent:
    pass


@dataclass
class OnStartBot:
    pass


E = TypeVar("E")


class EventDispatcher(Generic[E]):
    """An ordered list of callbacks invoked with one event type."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[[E], Any]] = []

    def subscribe(self, func: Callable[[E], Any]) -> None:
        self._subscribers.append(func)

    def __iadd__(self, delegate: Callable[[E], Any]) -> "EventDispatcher[E]":
        self.subscribe(delegate)
        return self

    def invoke(self, event: E) -> None:
        for delegate in list(self._subscribers):
            delegate(event)

    def __len__(self) -> int:
        return len(self._subscribers)


class EventBus:
    """Routes events to the handlers connected for their exact type."""

    def __init__(self) -> None:
        self._handlers: defaultdict[type, list[Callable[[Any], Any]]] = defaultdict(list)

    def connect(self, event_type: type, handler: Callable[[Any], Any]) -> None:
        self._handlers[event_type].append(handler)

    def trigger(self, event: Any) -> None:
        for handler in list(self._handlers.get(type(event), ())):
            handler(event)