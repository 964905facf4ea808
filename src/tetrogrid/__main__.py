"""Terminal demo drawing every tetromino in all four rotations.

Run with: `python -m tetrogrid`

Pass ``--help`` to see options for the pixel densities, the spacing between
shapes and which shapes to draw.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .catalog import SHAPES, ShapeKind, shape_for
from .framebuffer import DEFAULT_X_DENSITY, DEFAULT_Y_DENSITY, Framebuffer
from .gallery import DEFAULT_MARGIN, render_gallery
from .terminal import terminal_size


LOGGER = logging.getLogger(__name__)


def shape_letters(value: str) -> str:
    """Validate a string of shape letters for ``--shapes``."""

    letters = value.upper()
    known = {kind.value for kind in ShapeKind}
    unknown = sorted(set(letters) - known)
    if unknown:
        raise argparse.ArgumentTypeError(
            f"unknown shape(s) {''.join(unknown)!r}; choose from {''.join(k.value for k in ShapeKind)}"
        )
    return letters


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--x-density", type=int, default=DEFAULT_X_DENSITY, help="Terminal columns per pixel.")
    parser.add_argument("--y-density", type=int, default=DEFAULT_Y_DENSITY, help="Terminal lines per pixel.")
    parser.add_argument("--margin", type=int, default=DEFAULT_MARGIN, help="Blank pixels between shapes.")
    parser.add_argument("--width", type=int, default=None, help="Override the terminal width in columns.")
    parser.add_argument("--height", type=int, default=None, help="Override the terminal height in lines.")
    parser.add_argument(
        "--shapes",
        type=shape_letters,
        default="".join(kind.value for kind in SHAPES),
        help="Letters of the shapes to draw, in order (default: all).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def build_frame(args: argparse.Namespace) -> Framebuffer:
    """Return a framebuffer with the requested shapes drawn into it."""

    columns, lines = terminal_size()
    if args.width is not None:
        columns = args.width
    if args.height is not None:
        lines = args.height
    framebuffer = Framebuffer(columns, lines, args.x_density, args.y_density)
    shapes = [shape_for(letter) for letter in args.shapes]
    drawn = render_gallery(framebuffer, shapes, margin=args.margin)
    LOGGER.info("Drew %d of %d rotations", drawn, len(shapes) * 4)
    return framebuffer


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    build_frame(args).display()


if __name__ == "__main__":
    main()
