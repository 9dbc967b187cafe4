"""A container that stacks its children along one axis."""

from __future__ import annotations

import enum

from tombgrid.gui.constraints import absolute, relative
from tombgrid.gui.container import Container
from tombgrid.gui.widget import Color, Rectangle, Widget


class StackOrientation(enum.Enum):
    COLUMN = "column"
    COLUMN_REVERSE = "column_reverse"
    ROW = "row"
    ROW_REVERSE = "row_reverse"


class ItemAlignment(enum.Enum):
    STRETCH = "stretch"
    BEGIN = "begin"
    CENTER = "center"
    END = "end"


class StackPanel(Container):
    def __init__(
        self,
        widget_id: str,
        gui,
        orientation: StackOrientation,
        background_color: Color,
        item_alignment: ItemAlignment = ItemAlignment.CENTER,
    ) -> None:
        super().__init__(widget_id, gui, background_color)
        self.orientation = orientation
        self.item_alignment = item_alignment
        self.spacing = 10.0
        self.outer_spacing = True

    @property
    def _vertical(self) -> bool:
        return self.orientation in (StackOrientation.COLUMN, StackOrientation.COLUMN_REVERSE)

    @property
    def _reversed(self) -> bool:
        return self.orientation in (StackOrientation.COLUMN_REVERSE, StackOrientation.ROW_REVERSE)

    def _set_position(self, child: Widget, constraint) -> None:
        if self._vertical:
            child.constraints.y = constraint
        else:
            child.constraints.x = constraint

    def _set_size(self, child: Widget, constraint) -> None:
        if self._vertical:
            child.constraints.height = constraint
        else:
            child.constraints.width = constraint

    def _extent(self, rect: Rectangle) -> float:
        return rect.height if self._vertical else rect.width

    def set_child_constraints(self) -> None:
        super().set_child_constraints()

        container_box = self.box()
        if not self.outer_spacing:
            if self._vertical:
                container_box.height += self.spacing
            else:
                container_box.width += self.spacing

        if not self.children:
            return

        if self.item_alignment is ItemAlignment.STRETCH:
            if self.orientation is StackOrientation.ROW_REVERSE:
                # The stretch layout leaves reversed rows untouched.
                return
            share = 1.0 / len(self.children)
            for index, child in enumerate(self.children):
                start = 1 - (index + 1) * share if self._reversed else index * share
                self._set_position(child, relative(start))
                self._set_size(child, relative(share))
            return

        ordered = list(reversed(self.children)) if self._reversed else list(self.children)
        available = self._extent(container_box)

        if self.item_alignment is ItemAlignment.BEGIN:
            current = self.spacing / 2.0
        else:
            total = sum(self._extent(child.box()) + self.spacing for child in self.children)
            if self.item_alignment is ItemAlignment.CENTER:
                current = (available - total + self.spacing) / 2.0
            else:
                current = (available - total) + self.spacing / 2.0

        for child in ordered:
            self._set_position(child, absolute(current))
            current += self._extent(child.box()) + self.spacing

    def box(self) -> Rectangle:
        box = Widget.box(self)
        if not self.outer_spacing:
            if self._vertical:
                box.height -= self.spacing
            else:
                box.width -= self.spacing
        return box