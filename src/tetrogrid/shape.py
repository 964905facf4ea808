"""Four-block shapes and their rotation geometry.

Block coordinates are relative to the shape's own origin and denote the top
left corner of each unit cell.  Shapes rotate about the centre of the square
enclosing their bounding box, which keeps the footprint of a quarter turn
aligned with the original one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Tuple

from .pixel import Pixel
from .rotation import Rotation, rotate_offset
from .vectors import BoundingBox, Vector2

if TYPE_CHECKING:
    from .framebuffer import Framebuffer


BLOCK_COUNT = 4

Blocks = Tuple[Vector2[int], ...]


def round_half_down(value: float) -> int:
    """Round to the nearest integer, sending exact halves toward zero.

    ``0.5 -> 0``, ``0.6 -> 1``, ``1.0 -> 1``, ``1.5 -> 1``, ``-0.5 -> 0``.
    """

    return int(math.copysign(math.ceil(abs(value) - 0.5), value))


def _as_block(block) -> Vector2[int]:
    if not isinstance(block, Vector2):
        block = Vector2.from_pair(block)
    return block


def lower_half_turn(blocks: Blocks, rotation: Rotation) -> Blocks:
    """Move blocks down one row when turned upside down.

    Reproduces the DTET convention for pieces whose naive half turn would sit
    one row too high.
    """

    if rotation is not Rotation.SOUTH:
        return blocks
    return tuple(Vector2(b.x, b.y + 1) for b in blocks)


def rotate_blocks(blocks: Iterable[Vector2[int]], center: Vector2[float], rotation: Rotation) -> Blocks:
    """Rotate ``blocks`` about ``center``, truncating the results to integers."""

    rotated = []
    for block in blocks:
        offset = block.convert(float) - center
        rotated.append((center + rotate_offset(offset, rotation)).convert(int))
    return tuple(rotated)


@dataclass(frozen=True)
class Shape:
    """A fixed four-block polyomino and the pixel it is drawn with.

    ``lower_on_180`` selects :func:`lower_half_turn` as the correction applied
    after a rotation; shapes without it are left exactly where the matrix puts
    them.
    """

    blocks: Blocks
    pixel: Pixel
    lower_on_180: bool = False

    def __post_init__(self) -> None:
        blocks = tuple(_as_block(b) for b in self.blocks)
        if len(blocks) != BLOCK_COUNT:
            raise ValueError(f"A shape needs exactly {BLOCK_COUNT} blocks, got {len(blocks)}")
        for block in blocks:
            if not all(isinstance(v, int) and v >= 0 for v in block):
                raise ValueError(f"Block coordinates must be non-negative integers: {block}")
        object.__setattr__(self, "blocks", blocks)

    def bounding_box(self) -> BoundingBox[int]:
        return BoundingBox.around(self.blocks)

    def rotation_center(self) -> Vector2[float]:
        """Return the point the shape rotates about.

        The larger bounding box dimension is used on both axes so the shape
        turns about the centre of its enclosing square.  The ``- 0.5`` moves
        from cell corners to cell centres.
        """

        dims = self.bounding_box().dimensions()
        side = max(dims.x, dims.y)
        return Vector2(side / 2 - 0.5, side / 2 - 0.5)

    def rounded_center(self) -> Vector2[int]:
        return self.rotation_center().map(round_half_down)

    def correct(self, blocks: Blocks, rotation: Rotation) -> Blocks:
        """Apply this shape's post-rotation correction to ``blocks``."""

        if self.lower_on_180:
            return lower_half_turn(blocks, rotation)
        return blocks

    def rotated(self, rotation: Rotation) -> "Shape":
        """Return a copy of this shape turned to ``rotation``.

        Always rotate the canonical template rather than an already rotated
        copy; the half-turn correction does not compose.
        """

        if rotation is Rotation.NORTH:
            return Shape(self.blocks, self.pixel, self.lower_on_180)
        blocks = rotate_blocks(self.blocks, self.rotation_center(), rotation)
        return Shape(self.correct(blocks, rotation), self.pixel, self.lower_on_180)

    def absolute_blocks(self, x: int, y: int) -> List[Vector2[int]]:
        """Return block coordinates with the shape's centre placed at ``(x, y)``."""

        anchor = Vector2(x, y)
        center = self.rounded_center()
        return [anchor + block - center for block in self.blocks]

    def draw_to(self, surface: "Framebuffer", x: int, y: int) -> None:
        """Draw the shape centred on ``(x, y)``.

        Raises:
            IndexError: If any block lands outside ``surface``.
        """

        for block in self.absolute_blocks(x, y):
            surface.set_pixel(block.x, block.y, self.pixel)


__all__ = ["Shape", "round_half_down", "rotate_blocks", "lower_half_turn"]
