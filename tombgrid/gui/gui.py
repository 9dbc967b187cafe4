"""The GUI root: menus, side panels, the navigation stack and input routing."""

from __future__ import annotations

from typing import Any, Optional

from tombgrid.events import (
    KEY_ESCAPE,
    KEY_F1,
    KEY_F2,
    KEY_F3,
    KeyAction,
    KeyEvent,
    MouseButtonEvent,
    MouseMoveEvent,
    OnLaraDiedEvent,
)
from tombgrid.game import GameState
from tombgrid.gui.container import Container
from tombgrid.gui.label import Label
from tombgrid.gui.menus import (
    ControlsPanel,
    DeathMenu,
    DebugPanel,
    GameMenus,
    InspectorPanel,
    LevelSelectMenu,
    OptionsMenu,
    PauseMenu,
)
from tombgrid.gui.widget import TRANSPARENT, WARNING, Canvas, Rectangle, Widget


class Gui:
    """Holds every widget and decides which of them see input and get drawn."""

    def __init__(self, app, width: float, height: float, icon_texture: Optional[Any] = None) -> None:
        self.app = app
        self.width = float(width)
        self.height = float(height)
        self.navigation: list[Widget] = []

        self.pause_menu = PauseMenu(self)
        self.options_menu = OptionsMenu(self)
        self.level_select_menu = LevelSelectMenu(self)
        self.controls_panel = ControlsPanel(self)
        self.inspector_panel = InspectorPanel(self, icon_texture)
        self.debug_panel = DebugPanel(self)
        self.death_menu = DeathMenu(self)
        self.warning_widget = Label("warning_label", self, TRANSPARENT, "", WARNING)
        self.warning_widget.hide()

        self.all_widgets: list[Widget] = [
            self.pause_menu,
            self.options_menu,
            self.level_select_menu,
            self.controls_panel,
            self.inspector_panel,
            self.debug_panel,
            self.death_menu,
        ]
        self.panels: list[Widget] = [self.inspector_panel, self.debug_panel, self.controls_panel]
        self._menus = {
            GameMenus.PAUSE_MENU: self.pause_menu,
            GameMenus.OPTIONS_MENU: self.options_menu,
            GameMenus.LEVEL_SELECT_MENU: self.level_select_menu,
            GameMenus.DEATH_MENU: self.death_menu,
        }
        self._panel_keys = {
            KEY_F1: self.debug_panel,
            KEY_F2: self.controls_panel,
            KEY_F3: self.inspector_panel,
        }

        app.game.event_bus.connect(OnLaraDiedEvent, self.handle_on_lara_died_event)

    def show_menu(self, menu: GameMenus) -> None:
        """Push a menu and pause, or with ``NONE`` clear all menus and resume."""
        if self.navigation:
            self.navigation[-1].hide()

        if menu is GameMenus.NONE:
            self.navigation.clear()
            self.app.game_state = GameState.RUNNING
            return

        widget = self._menus.get(menu)
        if widget is None:
            return
        self.navigation.append(widget)
        widget.show()
        self.app.game_state = GameState.PAUSED

    def pop_menu(self) -> None:
        """Close the top menu; resume the game once no menu is left."""
        if not self.navigation:
            return
        self.navigation.pop().hide()
        if self.navigation:
            self.navigation[-1].show()
        else:
            self.app.game_state = GameState.RUNNING

    def show_warning(self, text: str) -> None:
        self.warning_widget.text = text
        self.warning_widget.show()

    def hide_warning(self) -> None:
        self.warning_widget.hide()

    def set_screen_size(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        for widget in self.all_widgets:
            if isinstance(widget, Container):
                widget.set_child_constraints()

    def box(self) -> Rectangle:
        return Rectangle(0.0, 0.0, self.width, self.height)

    def update(self) -> None:
        for widget in self.all_widgets:
            widget.update()

    def render(self, canvas: Canvas) -> None:
        if self.navigation:
            self.navigation[-1].render(canvas)
        for panel in self.panels:
            if panel.visible:
                panel.render(canvas)
        if self.warning_widget.visible:
            self.warning_widget.render(canvas)

    def handle_mouse_button_event(self, event: MouseButtonEvent) -> None:
        if self.navigation:
            self.navigation[-1].handle_mouse_button_event(event)
        for panel in self.panels:
            if panel.visible:
                panel.handle_mouse_button_event(event)

    def handle_key_event(self, event: KeyEvent) -> None:
        """Escape opens or closes menus; F1-F3 toggle the side panels."""
        if event.action != KeyAction.PRESS or self.app.game_state is not GameState.RUNNING:
            return

        if event.key == KEY_ESCAPE:
            if self.navigation:
                self.pop_menu()
            else:
                self.show_menu(GameMenus.PAUSE_MENU)
            event.handled = True
            return

        panel = self._panel_keys.get(event.key)
        if panel is not None:
            if panel.visible:
                panel.hide()
            else:
                panel.show()
            event.handled = True

    def handle_mouse_move_event(self, event: MouseMoveEvent) -> None:
        if self.navigation:
            self.navigation[-1].handle_mouse_move_event(event)
        for panel in self.panels:
            if panel.visible:
                panel.handle_mouse_move_event(event)

    def handle_on_lara_died_event(self, event: OnLaraDiedEvent) -> None:
        """Pause the game and show the death menu."""
        if self.app.game_state is not GameState.RUNNING:
            raise RuntimeError("player died while the game was not running")
        self.app.game_state = GameState.PAUSED
        self.show_menu(GameMenus.DEATH_MENU)