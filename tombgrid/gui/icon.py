"""A widget that draws a texture stretched over its box."""

from __future__ import annotations

from typing import Any, Optional

from tombgrid.gui.widget import WHITE, Canvas, Color, Rectangle, Widget


class Icon(Widget):
    def __init__(
        self,
        widget_id: str,
        gui,
        texture: Optional[Any],
        background_color: Color = WHITE,
    ) -> None:
        Widget.__init__(self, widget_id, gui, background_color)
        self.texture = texture

    def render(self, canvas: Canvas) -> None:
        Widget.render(self, canvas)
        if self.texture:
            box = self.box()
            source = Rectangle(0.0, 0.0, float(self.texture.width), float(self.texture.height))
            dest = Rectangle(box.x, box.y, box.width, box.height)
            canvas.draw_texture(self.texture, source, dest, self.background_color)