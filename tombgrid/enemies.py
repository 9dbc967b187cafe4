"""Enemy kinds and the ways they move."""

from __future__ import annotations

import enum


class EnemyType(enum.Enum):
    SAW = "saw"
    SNAKE = "snake"


class MovementPattern(enum.Enum):
    FORWARD_BACK = "forwardback"
    LEFT_RIGHT = "leftright"
    FORWARD = "forward"


def enemy_type_from_string(text: str) -> EnemyType:
    try:
        return EnemyType(text)
    except ValueError:
        raise ValueError(f"unknown enemy type {text!r}") from None


def movement_pattern_from_string(text: str) -> MovementPattern:
    try:
        return MovementPattern(text)
    except ValueError:
        raise ValueError(f"unknown movement pattern {text!r}") from None