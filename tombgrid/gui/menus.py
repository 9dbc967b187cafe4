"""The game's menus and side panels."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from tombgrid.events import (
    MouseButtonEvent,
    MouseMoveEvent,
    OnStartBot,
    OskEvent,
    OskMoveRequested,
    RequestLevelEvent,
    RequestLevelRestart,
    ResourceUpdatedEvent,
)
from tombgrid.gui.button import TextButton
from tombgrid.gui.constraints import absolute, relative
from tombgrid.gui.label import Label, TextAlign
from tombgrid.gui.stack_panel import ItemAlignment, StackOrientation, StackPanel
from tombgrid.gui.widget import ANTHRAZITE_GREY, BLACK, TRANSPARENT, WHITE, Canvas, Rectangle
from tombgrid.transform import CameraComponent

FLT_MAX = 3.4028234663852886e38


class GameMenus(enum.Enum):
    NONE = "none"
    PAUSE_MENU = "pause_menu"
    OPTIONS_MENU = "options_menu"
    LEVEL_SELECT_MENU = "level_select_menu"
    DEATH_MENU = "death_menu"


def _text_button(
    widget_id: str,
    gui,
    text: str,
    height,
    width,
    on_click: Callable[[MouseButtonEvent], Any],
    corner_radius: float = 0.0,
) -> TextButton:
    button = TextButton(widget_id, gui, ANTHRAZITE_GREY, text)
    button.constraints.height = height
    button.constraints.width = width
    button.on_click += on_click
    button.corner_radius = corner_radius
    return button


def _format_number(value: float) -> str:
    """Shortest round-trip text of a number, without a trailing ``.0``."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class PauseMenu(StackPanel):
    def __init__(self, gui) -> None:
        super().__init__("game_menu", gui, StackOrientation.COLUMN, TRANSPARENT)
        self.constraints.width = relative(0.6)
        self.constraints.height = absolute(195.0)

        def start_bot(_event: MouseButtonEvent) -> None:
            self.gui.app.game.raise_event(OnStartBot())
            self.gui.show_menu(GameMenus.NONE)

        entries = [
            ("mainMenu_continue", "Back to game", self.on_resume_button_click),
            ("mainMenu_options", "Options", self.on_options_button_click),
            ("mainMenu_automation", "Bot Mode", start_bot),
            ("mainMenu_saveExit", "Close Game", self.on_exit_button_click),
        ]
        for widget_id, text, handler in entries:
            self.add_child(
                _text_button(widget_id, gui, text, absolute(45.0), relative(0.9), handler, 15.0)
            )

    def on_resume_button_click(self, event: MouseButtonEvent) -> None:
        self.gui.show_menu(GameMenus.NONE)

    def on_options_button_click(self, event: MouseButtonEvent) -> None:
        self.gui.show_menu(GameMenus.OPTIONS_MENU)

    def on_exit_button_click(self, event: MouseButtonEvent) -> None:
        self.gui.app.stop()


class OptionsMenu(StackPanel):
    def __init__(self, gui) -> None:
        super().__init__("options_menu", gui, StackOrientation.COLUMN, TRANSPARENT)
        self.constraints.width = relative(0.6)
        self.constraints.height = absolute(120.0)

        self.add_child(
            _text_button(
                "options_menu.level_select",
                gui,
                "Level Select",
                absolute(45.0),
                relative(1.0),
                lambda _e: self.gui.show_menu(GameMenus.LEVEL_SELECT_MENU),
            )
        )

        row = StackPanel("options_menu.last_row", gui, StackOrientation.ROW, TRANSPARENT)
        row.constraints.height = absolute(45.0)
        row.constraints.width = relative(1.0)
        row.outer_spacing = False
        self.add_child(row)

        for widget_id, text in (("options_menu.back", "Back"), ("options_menu.done", "Done")):
            row.add_child(
                _text_button(
                    widget_id,
                    gui,
                    text,
                    relative(1.0),
                    relative(0.5),
                    lambda _e: self.gui.pop_menu(),
                    15.0,
                )
            )


class LevelSelectMenu(StackPanel):
    LEVEL_COUNT = 5

    def __init__(self, gui) -> None:
        super().__init__("level_select_menu", gui, StackOrientation.COLUMN, TRANSPARENT)
        self.constraints.width = relative(0.6)
        self.constraints.height = absolute(120.0)

        for level in range(1, self.LEVEL_COUNT + 1):
            level_name = f"level_{level}"
            button = TextButton(
                f"level_select_menu.{level_name}", gui, ANTHRAZITE_GREY, f"Level {level}"
            )
            button.constraints.height = relative(0.5)
            button.constraints.width = relative(0.5)
            button.on_click += self._select_handler(button, level_name)
            button.corner_radius = 15.0
            self.add_child(button)

    def _select_handler(self, button: TextButton, level_name: str):
        def select(event: MouseButtonEvent) -> None:
            self.gui.app.game.raise_event(RequestLevelEvent(level_name))
            for _ in range(3):
                self.gui.pop_menu()
            event.handled = True
            # The pointer is gone from the hidden menu; clear the hover look.
            button.on_mouse_leave.invoke(MouseMoveEvent(FLT_MAX, FLT_MAX, FLT_MAX, FLT_MAX))

        return select


class DeathMenu(StackPanel):
    def __init__(self, gui) -> None:
        super().__init__("death_menu", gui, StackOrientation.COLUMN, TRANSPARENT)
        self.constraints.width = relative(0.6)
        self.constraints.height = absolute(195.0)

        def retry(_event: MouseButtonEvent) -> None:
            self.gui.app.game.raise_event(RequestLevelRestart())
            self.gui.pop_menu()

        self.add_child(
            _text_button(
                "deathMenu_retry", gui, "Retry", absolute(45.0), relative(0.9), retry, 15.0
            )
        )
        self.add_child(
            _text_button(
                "deathMenu_saveExit",
                gui,
                "Close Game",
                absolute(45.0),
                relative(0.9),
                lambda _e: self.gui.app.stop(),
                15.0,
            )
        )


class ControlsPanel(StackPanel):
    """On-screen movement buttons; visible from the start."""

    _BUTTONS = (
        ("controls_menu.move_left", "Left", OskEvent.MOVE_LEFT),
        ("controls_menu.move_right", "Right", OskEvent.MOVE_RIGHT),
        ("controls_menu.move_forward", "Forwards", OskEvent.MOVE_FORWARD),
        ("controls_menu.move_backward", "Backwards", OskEvent.MOVE_BACKWARD),
        ("controls_menu.interact", "Interact", OskEvent.INTERACT),
    )

    def __init__(self, gui) -> None:
        super().__init__(
            "controls_menu", gui, StackOrientation.COLUMN, ANTHRAZITE_GREY, ItemAlignment.BEGIN
        )
        self.constraints.x = absolute(0)
        self.constraints.y = absolute(0)
        self.constraints.width = relative(0.3)
        self.corner_radius = 0.0

        for widget_id, text, osk_event in self._BUTTONS:
            self.add_child(
                _text_button(
                    widget_id,
                    gui,
                    text,
                    absolute(30),
                    relative(0.9),
                    lambda _e, osk=osk_event: self.gui.app.game.raise_event(OskMoveRequested(osk)),
                )
            )

        self.show()


class DebugPanel(StackPanel):
    _LABELS = (
        "debug_menu.fpsCounter",
        "debug_menu.sunDirection",
        "debug_menu.sunPosition",
        "debug_menu.cameraPosition",
        "debug_menu.cameraPitch",
        "debug_menu.cameraYaw",
    )

    def __init__(self, gui) -> None:
        super().__init__(
            "debug_menu", gui, StackOrientation.COLUMN, ANTHRAZITE_GREY, ItemAlignment.BEGIN
        )
        self.constraints.x = absolute(0)
        self.constraints.y = absolute(0)
        self.constraints.width = relative(0.3)
        self.corner_radius = 0.0

        def reload_resources(_event: MouseButtonEvent) -> None:
            game = self.gui.app.game
            game.reload_resources()
            game.raise_event(ResourceUpdatedEvent(""))

        self.add_child(
            _text_button(
                "debug_menu.reloadResourcesButton",
                gui,
                "Reload Resources",
                absolute(30),
                relative(0.9),
                reload_resources,
            )
        )

        for widget_id in self._LABELS:
            text = "FPS: " if widget_id == "debug_menu.fpsCounter" else ""
            label = Label(widget_id, gui, TRANSPARENT, text)
            label.text_align = TextAlign.BEGIN
            label.constraints.height = absolute(30)
            label.constraints.width = relative(0.9)
            self.add_child(label)

    def update(self) -> None:
        app = self.gui.app
        game = app.game

        fps = 1.0 / app.update_time if app.update_time else float("inf")
        self.get_child("debug_menu.fpsCounter").text = f"FPS: {fps:.6f}"

        camera = game.registry.get(game.camera, CameraComponent)
        x, y, z = camera.position
        self.get_child("debug_menu.cameraPosition").text = (
            f"Camera position: ({_format_number(x)}, {_format_number(y)}, {_format_number(z)})"
        )


class InspectorPanel(StackPanel):
    """Shows a thumbnail texture above a few lines of help."""

    def __init__(self, gui, icon_texture: Optional[Any] = None) -> None:
        super().__init__(
            "inspector_menu", gui, StackOrientation.COLUMN, ANTHRAZITE_GREY, ItemAlignment.BEGIN
        )
        self.constraints.x = absolute(0)
        self.constraints.y = absolute(0)
        self.constraints.width = relative(0.3)
        self.corner_radius = 0.0
        self.icon_texture = icon_texture

        for widget_id, text in (
            ("inspector_menu.info_1", "Press 5 to cycle"),
            ("inspector_menu.info_2", "Press 6 to generate"),
        ):
            info = Label(widget_id, gui, TRANSPARENT, text, BLACK)
            info.constraints.height = absolute(30)
            info.constraints.width = relative(0.9)
            self.add_child(info)

    def render(self, canvas: Canvas) -> None:
        super().render(canvas)
        texture = self.icon_texture
        if texture is None:
            return
        box = self.box()
        width, height = float(texture.width), float(texture.height)
        px = box.width / 2 - width / 2
        # Render targets are stored bottom-up, so the source is flipped vertically.
        source = Rectangle(0.0, 0.0, width, -height)
        dest = Rectangle(px, box.y, width, height)
        canvas.draw_texture(texture, source, dest, WHITE)