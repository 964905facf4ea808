"""The seven tetromino templates."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple, Union

from .ansi import Color
from .pixel import Pixel
from .shape import Shape


class ShapeKind(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"


# Spawn layouts as (x, y) cells, the color each is drawn in and whether the
# half turn is lowered by one row.
_TEMPLATES: Dict[ShapeKind, Tuple[List[Tuple[int, int]], Color, bool]] = {
    ShapeKind.I: ([(0, 2), (1, 2), (2, 2), (3, 2)], Color.CYAN, True),
    ShapeKind.J: ([(1, 0), (1, 1), (0, 2), (1, 2)], Color.BLUE, False),
    ShapeKind.L: ([(1, 0), (1, 1), (1, 2), (2, 2)], Color.WHITE, False),
    ShapeKind.O: ([(0, 0), (1, 0), (0, 1), (1, 1)], Color.YELLOW, False),
    ShapeKind.T: ([(0, 1), (1, 1), (2, 1), (1, 2)], Color.PURPLE, True),
    ShapeKind.S: ([(1, 1), (2, 1), (0, 2), (1, 2)], Color.GREEN, True),
    ShapeKind.Z: ([(0, 1), (1, 1), (1, 2), (2, 2)], Color.RED, True),
}


SHAPES: Dict[ShapeKind, Shape] = {
    kind: Shape(tuple(blocks), Pixel(color), lower)
    for kind, (blocks, color, lower) in _TEMPLATES.items()
}


def shape_for(kind: Union[ShapeKind, str]) -> Shape:
    """Return the template for ``kind``.

    ``kind`` may be a :class:`ShapeKind` or its letter in either case.

    Raises:
        ValueError: If ``kind`` names no shape.
    """

    if not isinstance(kind, ShapeKind):
        kind = ShapeKind(str(kind).upper())
    return SHAPES[kind]


__all__ = ["ShapeKind", "SHAPES", "shape_for"]
