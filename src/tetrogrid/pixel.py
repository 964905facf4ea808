"""Visual state of a single logical framebuffer cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .ansi import Color, paint

BACKGROUND_GLYPH = " "
FILL_GLYPH = "#"

# Integer stored in the framebuffer grid for each color.  ``0`` is reserved for
# the background.
COLOR_CODES: Dict[Color, int] = {c: i + 1 for i, c in enumerate(Color)}
_CODE_COLORS: Dict[int, Color] = {code: c for c, code in COLOR_CODES.items()}


@dataclass(frozen=True)
class Pixel:
    """Either the background (``color is None``) or a solid color."""

    color: Optional[Color] = None

    @property
    def is_background(self) -> bool:
        return self.color is None

    @property
    def code(self) -> int:
        return 0 if self.color is None else COLOR_CODES[self.color]

    @classmethod
    def from_code(cls, code: int) -> "Pixel":
        if code == 0:
            return BACKGROUND
        return cls(_CODE_COLORS[int(code)])

    def glyph(self) -> str:
        """Return the one-cell terminal rendering of this pixel.

        Colored pixels use the same foreground and background, so the glyph
        character itself never shows and the cell reads as a solid block.
        """

        if self.color is None:
            return paint(BACKGROUND_GLYPH, Color.BLACK, Color.BLACK)
        return paint(FILL_GLYPH, self.color, self.color)


BACKGROUND = Pixel()


__all__ = ["Pixel", "BACKGROUND", "COLOR_CODES"]
