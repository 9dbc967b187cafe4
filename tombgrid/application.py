"""The window, the frame loop and the routing of input to the GUI and the game."""

from __future__ import annotations

import argparse
from typing import Any, Optional

import pygame

from tombgrid.events import (
    KEY_ESCAPE,
    KEY_F1,
    KEY_F2,
    KEY_F3,
    MOUSE_BUTTON_LEFT,
    MOUSE_PRESS,
    MOUSE_RELEASE,
    FramebufferSizeEvent,
    KeyAction,
    KeyEvent,
    MouseButtonEvent,
    MouseMoveEvent,
    MouseScrollEvent,
)
from tombgrid.game import DEFAULT_RESOURCE_DIR, Game, GameState
from tombgrid.gui.gui import Gui
from tombgrid.gui.widget import WHITE, Canvas, Color, Rectangle

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
TARGET_FPS = 60
WINDOW_TITLE = "city builder demo"
BACKGROUND = (115, 140, 153)

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESCAPE,
    pygame.K_F1: KEY_F1,
    pygame.K_F2: KEY_F2,
    pygame.K_F3: KEY_F3,
}
_PYGAME_LEFT_BUTTON = 1


class PygameCanvas(Canvas):
    """Draws widgets onto a pygame surface."""

    def __init__(self, surface: "pygame.Surface") -> None:
        self.surface = surface
        self._fonts: dict[int, Any] = {}

    def _font(self, size: int):
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _fill(self, rect: Rectangle, color: Color, border_radius: int = 0) -> None:
        if color.a == 0:
            return
        area = pygame.Rect(int(rect.x), int(rect.y), max(0, int(rect.width)), max(0, int(rect.height)))
        rgba = (color.r, color.g, color.b, color.a)
        if color.a == 255:
            pygame.draw.rect(self.surface, rgba, area, border_radius=border_radius)
            return
        overlay = pygame.Surface(area.size, pygame.SRCALPHA)
        pygame.draw.rect(overlay, rgba, overlay.get_rect(), border_radius=border_radius)
        self.surface.blit(overlay, area.topleft)

    def draw_rectangle(self, rect, color):
        self._fill(rect, color)

    def draw_rectangle_rounded(self, rect, roundness, segments, color):
        radius = int(min(max(roundness, 0.0), 1.0) * min(rect.width, rect.height) / 2)
        self._fill(rect, color, radius)

    def draw_text(self, text, x, y, size, color):
        image = self._font(size).render(text, True, (color.r, color.g, color.b))
        if color.a != 255:
            image.set_alpha(color.a)
        self.surface.blit(image, (int(x), int(y)))

    def measure_text(self, text, size):
        return self._font(size).size(text)[0]

    def draw_texture(self, texture, source, dest, tint):
        flip_x, flip_y = source.width < 0, source.height < 0
        area = pygame.Rect(int(source.x), int(source.y), int(abs(source.width)), int(abs(source.height)))
        image = texture.subsurface(area.clip(texture.get_rect()))
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        size = (max(0, int(dest.width)), max(0, int(dest.height)))
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        if tint != WHITE:
            image = image.copy()
            image.fill((tint.r, tint.g, tint.b, tint.a), special_flags=pygame.BLEND_RGBA_MULT)
        self.surface.blit(image, (int(dest.x), int(dest.y)))


class Application:
    """Creates the game and the GUI and forwards input between them."""

    def __init__(
        self,
        resource_dir: str = DEFAULT_RESOURCE_DIR,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        resource_manager: Optional[Any] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.stop_requested = False
        self.update_time = 1.0 / TARGET_FPS
        self.last_cursor_pos = (0.0, 0.0)
        self.game = Game(resource_manager=resource_manager, resource_dir=resource_dir)
        self.gui = Gui(self, width, height)

    @property
    def game_state(self) -> GameState:
        return self.game.state

    @game_state.setter
    def game_state(self, state: GameState) -> None:
        self.game.state = state

    def _dispatch(self, event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.VIDEORESIZE:
            self.gui.set_screen_size(float(event.w), float(event.h))
        elif event.type == pygame.KEYDOWN and event.key in _PYGAME_KEYS:
            self.on_key_event(KeyEvent(_PYGAME_KEYS[event.key], 0, KeyAction.PRESS, 0))
        elif event.type == pygame.MOUSEMOTION:
            x, y = (float(v) for v in event.pos)
            last_x, last_y = self.last_cursor_pos
            self.on_mouse_move_event(MouseMoveEvent(x, y, last_x, last_y))
            self.last_cursor_pos = (x, y)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if event.button == _PYGAME_LEFT_BUTTON:
                action = MOUSE_PRESS if event.type == pygame.MOUSEBUTTONDOWN else MOUSE_RELEASE
                x, y = self.last_cursor_pos
                self.on_mouse_button_event(MouseButtonEvent(x, y, MOUSE_BUTTON_LEFT, action, 0))
        elif event.type == pygame.MOUSEWHEEL:
            self.on_mouse_scroll_event(MouseScrollEvent(float(event.x), float(event.y)))

    def run(self) -> None:
        """Open the window and run frames until a stop is requested."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            canvas = PygameCanvas(screen)
            clock = pygame.time.Clock()

            while not self.stop_requested:
                for event in pygame.event.get():
                    self._dispatch(event)

                self.update_time = 1.0 / TARGET_FPS
                canvas.surface = pygame.display.get_surface()
                canvas.surface.fill(BACKGROUND)

                self.game.update(self.update_time)
                self.gui.update()
                self.gui.render(canvas)

                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.quit()

    def stop(self) -> None:
        self.stop_requested = True

    def on_key_event(self, event: KeyEvent) -> None:
        self.gui.handle_key_event(event)
        if not event.handled:
            self.game.raise_event(event)

    def on_framebuffer_size_event(self, event: FramebufferSizeEvent) -> None:
        self.gui.set_screen_size(event.width, event.height)
        self.game.raise_event(event)

    def on_mouse_move_event(self, event: MouseMoveEvent) -> None:
        self.game.raise_event(event)
        self.gui.handle_mouse_move_event(event)

    def on_mouse_button_event(self, event: MouseButtonEvent) -> None:
        self.gui.handle_mouse_button_event(event)
        if not event.handled:
            self.game.raise_event(event)

    def on_mouse_scroll_event(self, event: MouseScrollEvent) -> None:
        self.game.raise_event(event)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the game.")
    parser.add_argument(
        "--resources",
        default=DEFAULT_RESOURCE_DIR,
        help="resource directory, with a trailing separator",
    )
    args = parser.parse_args(argv)
    Application(resource_dir=args.resources).run()
    return 0