"""A widget that holds and forwards to child widgets."""

from __future__ import annotations

from typing import Optional

from tombgrid.events import MouseButtonEvent, MouseMoveEvent
from tombgrid.gui.widget import Canvas, Color, Widget


class Container(Widget):
    def __init__(self, widget_id: str, gui, background_color: Color) -> None:
        super().__init__(widget_id, gui, background_color)
        self.children: list[Widget] = []

    def handle_mouse_button_event(self, event: MouseButtonEvent) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.handle_mouse_button_event(event)

    def handle_mouse_move_event(self, event: MouseMoveEvent) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.handle_mouse_move_event(event)

    def add_child(self, child: Widget) -> None:
        self.children.append(child)
        child.parent = self
        self.set_child_constraints()

    def get_child(self, widget_id: str) -> Optional[Widget]:
        return next((child for child in self.children if child.id == widget_id), None)

    def set_child_constraints(self) -> None:
        """Lay out the children; the plain container only relays to nested containers."""
        for child in self.children:
            if isinstance(child, Container):
                child.set_child_constraints()

    def show(self) -> None:
        super().show()
        for child in self.children:
            child.show()

    def hide(self) -> None:
        super().hide()
        for child in self.children:
            child.hide()

    def update(self) -> None:
        for child in self.children:
            child.update()

    def render(self, canvas: Canvas) -> None:
        super().render(canvas)
        for child in self.children:
            child.render(canvas)