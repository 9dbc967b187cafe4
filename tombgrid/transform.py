"""4x4 transform matrices and the components that carry them.

A matrix is a tuple of four row tuples that transforms column vectors,
so the translation sits in the last column.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

Vector3 = tuple[float, float, float]
Row = tuple[float, float, float, float]
Matrix = tuple[Row, Row, Row, Row]

DEG2RAD = math.pi / 180.0


def matrix_identity() -> Matrix:
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def matrix_scale(x: float, y: float, z: float) -> Matrix:
    return (
        (float(x), 0.0, 0.0, 0.0),
        (0.0, float(y), 0.0, 0.0),
        (0.0, 0.0, float(z), 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def matrix_translate(x: float, y: float, z: float) -> Matrix:
    return (
        (1.0, 0.0, 0.0, float(x)),
        (0.0, 1.0, 0.0, float(y)),
        (0.0, 0.0, 1.0, float(z)),
        (0.0, 0.0, 0.0, 1.0),
    )


def matrix_rotate(axis: Vector3, angle: float) -> Matrix:
    """Rotation by ``angle`` radians about ``axis``, which need not be unit length."""
    x, y, z = axis
    length_squared = x * x + y * y + z * z
    if length_squared not in (0.0, 1.0):
        inverse = 1.0 / math.sqrt(length_squared)
        x, y, z = x * inverse, y * inverse, z * inverse
    s, c = math.sin(angle), math.cos(angle)
    t = 1.0 - c
    return (
        (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0),
        (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0),
        (z * x * t - y * s, z * y * t + x * s, z * z * t + c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def matrix_multiply(left: Matrix, right: Matrix) -> Matrix:
    """Compose two transforms: ``left`` is applied first, then ``right``."""
    columns = list(zip(*left))
    return tuple(
        tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
        for row in right
    )


@dataclass
class CameraComponent:
    position: Vector3 = (0.0, 0.0, 0.0)
    target: Vector3 = (0.0, 0.0, -1.0)
    up: Vector3 = (0.0, 1.0, 0.0)
    fovy: float = 45.0


class BaseTransformationComponent:
    """A ready-made world transform."""

    def __init__(self, transform: Matrix | None = None) -> None:
        self.transform: Matrix = matrix_identity() if transform is None else transform

    def assign_to_entity(self, entity, registry) -> None:
        registry.emplace(entity, BaseTransformationComponent(self.transform))


class TransformationComponent(BaseTransformationComponent):
    """Position, rotation and scale, sealed into a transform matrix."""

    def __init__(
        self,
        position: Vector3 = (0.0, 0.0, 0.0),
        rotation_axis: Vector3 = (0.0, 1.0, 0.0),
        rotation_angle: float = 0.0,
        scale: Vector3 = (1.0, 1.0, 1.0),
    ) -> None:
        super().__init__()
        self.position = position
        self.rotation_axis = rotation_axis
        self.rotation_angle = rotation_angle
        self.scale = scale
        self.is_sealed = False
        self.seal()

    def unseal(self) -> None:
        self.is_sealed = False

    def seal(self) -> None:
        """Recompute the transform: scale, then rotate (degrees), then translate."""
        scaling = matrix_scale(*self.scale)
        rotation = matrix_rotate(self.rotation_axis, self.rotation_angle * DEG2RAD)
        translation = matrix_translate(*self.position)
        self.transform = matrix_multiply(matrix_multiply(scaling, rotation), translation)
        self.is_sealed = True

    def assign_to_entity(self, entity, registry) -> None:
        registry.emplace(
            entity,
            TransformationComponent(self.position, self.rotation_axis, self.rotation_angle, self.scale),
        )