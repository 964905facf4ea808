"""ANSI escape sequences for colored terminal output."""

from __future__ import annotations

from enum import Enum

ESC = "\x1b"
RESET = f"{ESC}[0m"
CLEAR_SCREEN = f"{ESC}[2J"
CURSOR_HOME = f"{ESC}[1;H"


class Color(Enum):
    """The eight basic terminal colors, valued by their SGR foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37

    @property
    def foreground(self) -> int:
        return self.value

    @property
    def background(self) -> int:
        return self.value + 10


def paint(text: str, fg: Color, bg: Color) -> str:
    """Return ``text`` wrapped in SGR codes for ``fg`` on ``bg``."""

    return f"{ESC}[{bg.background};{fg.foreground}m{text}{RESET}"


__all__ = ["Color", "paint", "CLEAR_SCREEN", "CURSOR_HOME", "RESET"]
