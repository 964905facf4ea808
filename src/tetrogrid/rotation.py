"""Quarter-turn rotation states and their linear transforms.

Screen coordinates grow to the right and downwards, so the ``EAST`` transform
``(x, y) -> (-y, x)`` turns a shape a quarter turn clockwise as seen on the
terminal.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray

from .vectors import Vector2


class RotationMatrix:
    """2x2 linear transform acting on column vectors."""

    __slots__ = ("values",)

    def __init__(self, values) -> None:
        self.values: NDArray[np.float64] = np.asarray(values, dtype=np.float64).reshape(2, 2)

    def __matmul__(self, other: "RotationMatrix") -> "RotationMatrix":
        """Return the transform applying ``other`` first, then ``self``."""

        return RotationMatrix(self.values @ other.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __repr__(self) -> str:
        return f"RotationMatrix({self.values.tolist()})"

    def apply(self, vector: Vector2[float]) -> Vector2[float]:
        """Return ``vector`` transformed by this matrix."""

        x, y = self.values @ np.array([vector.x, vector.y], dtype=np.float64)
        return Vector2(float(x), float(y))


class Rotation(Enum):
    """The four orientations a shape can take."""

    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270

    @property
    def matrix(self) -> RotationMatrix:
        return _MATRICES[self]

    def clockwise(self) -> "Rotation":
        return _CLOCKWISE[self]

    def counterclockwise(self) -> "Rotation":
        return _COUNTERCLOCKWISE[self]


_MATRICES = {
    Rotation.NORTH: RotationMatrix([[1, 0], [0, 1]]),
    Rotation.EAST: RotationMatrix([[0, -1], [1, 0]]),
    Rotation.SOUTH: RotationMatrix([[-1, 0], [0, -1]]),
    Rotation.WEST: RotationMatrix([[0, 1], [-1, 0]]),
}

_CLOCKWISE = {
    Rotation.NORTH: Rotation.EAST,
    Rotation.EAST: Rotation.SOUTH,
    Rotation.SOUTH: Rotation.WEST,
    Rotation.WEST: Rotation.NORTH,
}

_COUNTERCLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}


def rotate_offset(offset: Vector2[float], rotation: Rotation) -> Vector2[float]:
    """Rotate ``offset`` about the origin by ``rotation``."""

    return rotation.matrix.apply(offset)


__all__ = ["Rotation", "RotationMatrix", "rotate_offset"]
