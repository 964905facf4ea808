"""A shape placed on the framebuffer with a current orientation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .framebuffer import Framebuffer
from .rotation import Rotation
from .shape import Shape
from .vectors import BoundingBox, Vector2


@dataclass
class Piece:
    """Rotatable shape anchored at ``position``.

    ``position`` is where the shape's visual centre is drawn, not a corner.
    The rotated shape is derived from ``template`` on every access, so it
    always matches ``rotation``.
    """

    template: Shape
    position: Vector2[int] = field(default_factory=lambda: Vector2(0, 0))
    rotation: Rotation = Rotation.NORTH

    @property
    def shape(self) -> Shape:
        """The template turned to the current rotation."""

        return self.template.rotated(self.rotation)

    def rotate_to(self, rotation: Rotation) -> None:
        self.rotation = rotation

    def rotate_cw(self) -> None:
        """Turn the piece a quarter turn clockwise."""

        self.rotate_to(self.rotation.clockwise())

    def rotate_ccw(self) -> None:
        """Turn the piece a quarter turn counter-clockwise."""

        self.rotate_to(self.rotation.counterclockwise())

    def move(self, dx: int, dy: int) -> None:
        """Shift the anchor by ``dx`` columns and ``dy`` rows."""

        self.position = self.position + Vector2(dx, dy)

    def bounding_box(self) -> BoundingBox[int]:
        return self.shape.bounding_box()

    def blocks(self) -> List[Vector2[int]]:
        """Return the absolute block coordinates for this piece."""

        return self.shape.absolute_blocks(self.position.x, self.position.y)

    def draw_to(self, surface: Framebuffer) -> None:
        self.shape.draw_to(surface, self.position.x, self.position.y)


__all__ = ["Piece"]
