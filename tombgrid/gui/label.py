"""A widget that draws a line of text."""

from __future__ import annotations

import enum

from tombgrid.gui.widget import WHITE, Canvas, Color, Widget

FONT_SIZE = 28


class TextAlign(enum.Enum):
    BEGIN = "begin"
    CENTER = "center"
    END = "end"


class Label(Widget):
    def __init__(
        self,
        widget_id: str,
        gui,
        background_color: Color,
        text: str = "",
        text_color: Color = WHITE,
    ) -> None:
        Widget.__init__(self, widget_id, gui, background_color)
        self.text = text
        self.text_color = text_color
        self.text_align = TextAlign.CENTER

    def render(self, canvas: Canvas) -> None:
        if not self.visible:
            return
        Widget.render(self, canvas)
        box = self.box()
        if self.text_align is TextAlign.CENTER:
            size = canvas.measure_text(self.text, FONT_SIZE)
            start_x = box.x + box.width * 0.5 - size * 0.5
            start_y = box.y + box.height * 0.5 - FONT_SIZE * 0.5
            canvas.draw_text(self.text, int(start_x), int(start_y), FONT_SIZE, self.text_color)
        else:
            canvas.draw_text(self.text, int(box.x), int(box.y), FONT_SIZE, self.text_color)