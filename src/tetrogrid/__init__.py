"""Tetromino geometry and a terminal framebuffer to draw it into."""

from .vectors import BoundingBox, Vector2
from .rotation import Rotation, RotationMatrix
from .ansi import Color
from .pixel import BACKGROUND, Pixel
from .shape import Shape, round_half_down
from .framebuffer import Framebuffer
from .piece import Piece
from .catalog import SHAPES, ShapeKind, shape_for
from .terminal import terminal_size
from .gallery import render_gallery

__all__ = [
    "Vector2",
    "BoundingBox",
    "Rotation",
    "RotationMatrix",
    "Color",
    "Pixel",
    "BACKGROUND",
    "Shape",
    "round_half_down",
    "Framebuffer",
    "Piece",
    "ShapeKind",
    "SHAPES",
    "shape_for",
    "terminal_size",
    "render_gallery",
]
