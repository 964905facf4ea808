"""Logical pixel grid rendered into terminal character cells."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

import numpy as np
from numpy.typing import NDArray

from .ansi import CLEAR_SCREEN, CURSOR_HOME
from .pixel import BACKGROUND, Pixel


LOGGER = logging.getLogger(__name__)

# Terminal cells per logical pixel.  Character cells are roughly twice as tall
# as they are wide, so two columns per pixel gives a near-square pixel.
DEFAULT_X_DENSITY = 2
DEFAULT_Y_DENSITY = 1

Grid = NDArray[np.uint8]


def _check_density(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class Framebuffer:
    """Grid of :class:`Pixel` values sized from a terminal's dimensions.

    ``term_width`` and ``term_height`` are in character cells; the logical
    size is those divided (floored) by the density on each axis.  Cells are
    stored row-major, so the flat index of ``(x, y)`` is ``y * width + x``.
    """

    def __init__(
        self,
        term_width: int,
        term_height: int,
        x_density: int = DEFAULT_X_DENSITY,
        y_density: int = DEFAULT_Y_DENSITY,
    ) -> None:
        if term_width < 0 or term_height < 0:
            raise ValueError("Terminal dimensions must not be negative")
        self.term_width = term_width
        self.term_height = term_height
        self.x_density = _check_density("x_density", x_density)
        self.y_density = _check_density("y_density", y_density)
        self.width = term_width // self.x_density
        self.height = term_height // self.y_density
        self.grid: Grid = np.zeros((self.height, self.width), dtype=np.uint8)
        LOGGER.debug(
            "Framebuffer %dx%d cells -> %dx%d pixels",
            term_width,
            term_height,
            self.width,
            self.height,
        )

    @property
    def data(self) -> Grid:
        """Flat row-major view of the grid."""

        return self.grid.reshape(-1)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the framebuffer.
        """
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds")
        return Pixel.from_code(self.grid[y, x])

    def set_pixel(self, x: int, y: int, value: Pixel) -> None:
        """Replace the pixel at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the framebuffer.
        """
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds")
        self.grid[y, x] = np.uint8(value.code)

    def clear(self) -> None:
        """Reset every cell to the background."""

        self.grid.fill(BACKGROUND.code)

    def lines(self) -> List[str]:
        """Return the physical terminal lines making up this frame."""

        glyphs = {}
        lines: List[str] = []
        for row in self.grid:
            parts = []
            for code in row:
                glyph = glyphs.get(code)
                if glyph is None:
                    glyph = glyphs[code] = Pixel.from_code(code).glyph() * self.x_density
                parts.append(glyph)
            line = "".join(parts)
            lines.extend([line] * self.y_density)
        return lines

    def to_string(self) -> str:
        """Serialize the frame, one newline-terminated entry per line."""

        return "".join(f"{line}\n" for line in self.lines())

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Clear the screen and draw the whole frame to ``stream``."""

        out = stream if stream is not None else sys.stdout
        out.write(CLEAR_SCREEN + CURSOR_HOME)
        out.write(self.to_string())
        out.flush()


__all__ = ["Framebuffer", "DEFAULT_X_DENSITY", "DEFAULT_Y_DENSITY"]
