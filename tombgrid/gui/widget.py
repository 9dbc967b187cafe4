"""Base widget, geometry helpers and drawing surfaces."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from tombgrid.events import EventDispatcher, MouseButtonEvent, MouseMoveEvent
from tombgrid.gui.constraints import ConstraintType, Constraints


@dataclass
class Rectangle:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
ANTHRAZITE_GREY = Color(56, 62, 66)
WARNING = Color(230, 41, 55)


def point_inside(rect: Rectangle, x: float, y: float) -> bool:
    return rect.x <= x <= rect.x + rect.width and rect.y <= y <= rect.y + rect.height


class Canvas(abc.ABC):
    """A surface widgets draw themselves onto."""

    @abc.abstractmethod
    def draw_rectangle(self, rect: Rectangle, color: Color) -> None: ...

    @abc.abstractmethod
    def draw_rectangle_rounded(
        self, rect: Rectangle, roundness: float, segments: int, color: Color
    ) -> None: ...

    @abc.abstractmethod
    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None: ...

    @abc.abstractmethod
    def measure_text(self, text: str, size: int) -> int: ...

    @abc.abstractmethod
    def draw_texture(self, texture: Any, source: Rectangle, dest: Rectangle, tint: Color) -> None: ...


class RecordingCanvas(Canvas):
    """A canvas that records every draw call as a tuple in ``calls``."""

    def __init__(self, char_width_ratio: float = 0.5) -> None:
        self.char_width_ratio = char_width_ratio
        self.calls: list[tuple] = []

    def draw_rectangle(self, rect, color):
        self.calls.append(("rectangle", rect, color))

    def draw_rectangle_rounded(self, rect, roundness, segments, color):
        self.calls.append(("rectangle_rounded", rect, roundness, segments, color))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("text", text, x, y, size, color))

    def measure_text(self, text, size):
        return int(len(text) * size * self.char_width_ratio)

    def draw_texture(self, texture, source, dest, tint):
        self.calls.append(("texture", texture, source, dest, tint))


class _BoxSource(Protocol):
    def box(self) -> Rectangle: ...


class Widget:
    """A rectangular GUI element laid out by its constraints."""

    def __init__(self, widget_id: str, gui: _BoxSource, background_color: Color) -> None:
        self.id = widget_id
        self.gui = gui
        self.background_color = background_color
        self.constraints = Constraints()
        self.corner_radius = 0.0
        self.visible = False
        self.parent: Optional[Widget] = None
        self.on_mouse_enter: EventDispatcher[MouseMoveEvent] = EventDispatcher()
        self.on_mouse_leave: EventDispatcher[MouseMoveEvent] = EventDispatcher()

    def handle_mouse_button_event(self, event: MouseButtonEvent) -> None:
        pass

    def handle_mouse_move_event(self, event: MouseMoveEvent) -> None:
        if not self.visible:
            return
        area = self.box()
        inside_now = point_inside(area, event.x, event.y)
        inside_before = point_inside(area, event.last_x, event.last_y)
        if inside_before and inside_now:
            self.on_mouse_enter.invoke(event)
        if not inside_now and inside_before:
            self.on_mouse_leave.invoke(event)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def update(self) -> None:
        pass

    def render(self, canvas: Canvas) -> None:
        if not self.visible or not self.constraints.valid():
            return
        area = self.box()
        if self.corner_radius > 0.0:
            canvas.draw_rectangle_rounded(area, self.corner_radius, 10, self.background_color)
        else:
            canvas.draw_rectangle(area, self.background_color)

    def box(self) -> Rectangle:
        parent_box = self.gui.box() if self.parent is None else self.parent.box()
        c = self.constraints

        def size(constraint, parent_size):
            if constraint.type is ConstraintType.ABSOLUTE:
                return constraint.value
            if constraint.type is ConstraintType.RELATIVE:
                return constraint.value * parent_size
            return 0.0

        width = size(c.width, parent_box.width)
        height = size(c.height, parent_box.height)
        if c.height.type is ConstraintType.ASPECT:
            height = width / c.height.value
        elif c.width.type is ConstraintType.ASPECT:
            width = height * c.width.value

        def offset(constraint, parent_size, own_size):
            if constraint.type is ConstraintType.ABSOLUTE:
                return constraint.value
            if constraint.type is ConstraintType.RELATIVE:
                return constraint.value * parent_size
            if constraint.type is ConstraintType.CENTER:
                return (parent_size - own_size) * 0.5
            return 0.0

        x = parent_box.x + offset(c.x, parent_box.width, width)
        y = parent_box.y + offset(c.y, parent_box.height, height)
        return Rectangle(x, y, width, height)