"""Grid cell positions and the surfaces a cell can be walked on."""

from __future__ import annotations

import enum
from dataclasses import dataclass

CELL_SIZE = 2.0


class Surface(enum.Enum):
    GROUND = "ground"
    FRONT = "front"
    SIDE = "side"


@dataclass
class CellPos:
    """Integer coordinates of a cell in the level grid."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iadd__(self, other: "CellPos") -> "CellPos":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __lt__(self, other: "CellPos") -> bool:
        """True only when every coordinate is smaller than the other's."""
        if not isinstance(other, CellPos):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z


def surface_from_string(text: str) -> Surface:
    """Parse a surface name; an empty name means the ground."""
    if not text:
        return Surface.GROUND
    try:
        return Surface(text)
    except ValueError:
        raise ValueError(f"unknown surface {text!r}") from None


def cell_to_world_position(cell: CellPos) -> tuple[float, float, float]:
    """The world-space position of a cell's origin."""
    return (cell.x * CELL_SIZE, cell.y * CELL_SIZE, cell.z * CELL_SIZE)