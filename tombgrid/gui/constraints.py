"""Layout constraints that position a widget inside its parent."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ConstraintType(enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    CENTER = "center"
    ASPECT = "aspect"


@dataclass(frozen=True)
class Constraint:
    type: ConstraintType
    value: float = 0.0


def absolute(value: float) -> Constraint:
    return Constraint(ConstraintType.ABSOLUTE, float(value))


def relative(value: float) -> Constraint:
    return Constraint(ConstraintType.RELATIVE, float(value))


def center() -> Constraint:
    return Constraint(ConstraintType.CENTER)


def aspect(value: float) -> Constraint:
    return Constraint(ConstraintType.ASPECT, float(value))


@dataclass
class Constraints:
    x: Constraint = field(default_factory=center)
    y: Constraint = field(default_factory=center)
    width: Constraint = field(default_factory=lambda: relative(1.0))
    height: Constraint = field(default_factory=lambda: relative(1.0))

    def valid(self) -> bool:
        """Whether these constraints describe a computable box."""
        if ConstraintType.ASPECT in (self.x.type, self.y.type):
            return False
        if self.width.type == ConstraintType.ASPECT and self.height.type == ConstraintType.ASPECT:
            return False
        if ConstraintType.CENTER in (self.width.type, self.height.type):
            return False
        return True