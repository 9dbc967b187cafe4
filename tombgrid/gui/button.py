"""Clickable widgets with a hover effect."""

from __future__ import annotations

from typing import Any, Optional

from tombgrid.events import MOUSE_BUTTON_LEFT, MOUSE_RELEASE, EventDispatcher, MouseButtonEvent
from tombgrid.gui.icon import Icon
from tombgrid.gui.label import Label
from tombgrid.gui.widget import ANTHRAZITE_GREY, BLACK, WHITE, Color, Widget, point_inside


class Button(Widget):
    def __init__(self, widget_id: str, gui, background_color: Color) -> None:
        Widget.__init__(self, widget_id, gui, background_color)
        self._init_button()

    def _init_button(self) -> None:
        self.on_click: EventDispatcher[MouseButtonEvent] = EventDispatcher()

        def enter(_event):
            self.background_color = WHITE

        def leave(_event):
            self.background_color = ANTHRAZITE_GREY

        self.on_mouse_enter += enter
        self.on_mouse_leave += leave

    def handle_mouse_button_event(self, event: MouseButtonEvent) -> None:
        if not self.visible:
            return
        if not point_inside(self.box(), event.x, event.y):
            return
        if event.action == MOUSE_RELEASE and event.button == MOUSE_BUTTON_LEFT:
            self.on_click.invoke(event)


class TextButton(Label, Button):
    def __init__(self, widget_id: str, gui, background_color: Color, text: str) -> None:
        Label.__init__(self, widget_id, gui, background_color, text)
        self._init_button()

        def enter(_event):
            self.text_color = BLACK

        def leave(_event):
            self.text_color = WHITE

        self.on_mouse_enter += enter
        self.on_mouse_leave += leave


class IconButton(Icon, Button):
    def __init__(self, widget_id: str, gui, background_color: Color, icon: Optional[Any]) -> None:
        Icon.__init__(self, widget_id, gui, icon, background_color)
        self._init_button()