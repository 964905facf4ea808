"""Lay out shapes in all four orientations on a framebuffer."""

from __future__ import annotations

import logging
from typing import Iterable

from .framebuffer import Framebuffer
from .rotation import Rotation
from .shape import Shape


LOGGER = logging.getLogger(__name__)

# Blank pixels between neighbouring shapes and around the frame edge.
DEFAULT_MARGIN = 3


def render_gallery(framebuffer: Framebuffer, shapes: Iterable[Shape], margin: int = DEFAULT_MARGIN) -> int:
    """Draw every shape in each rotation, left to right, wrapping into bands.

    Each shape contributes a group of four rotations.  A group that would run
    past the right edge starts a new band below the tallest group of the
    current one.  Rotations that do not fit inside ``framebuffer`` are skipped.
    Returns the number of rotations drawn.
    """

    if margin < 0:
        raise ValueError("margin must not be negative")

    x_off = y_off = margin
    band_height = 0
    drawn = 0
    for shape in shapes:
        group = [shape.rotated(rotation) for rotation in Rotation]
        boxes = [s.bounding_box() for s in group]
        group_width = sum(box.width() for box in boxes) + margin * (len(group) - 1)
        group_height = max(box.height() for box in boxes)

        if x_off > margin and x_off + group_width + margin >= framebuffer.width:
            x_off = margin
            y_off += band_height + margin
            band_height = 0
        band_height = max(band_height, group_height)
        LOGGER.debug(
            "Group at (%d, %d): width=%d height=%d", x_off, y_off, group_width, group_height
        )

        for rotation, rotated, box in zip(Rotation, group, boxes):
            blocks = rotated.absolute_blocks(x_off, y_off)
            if all(framebuffer.contains(b.x, b.y) for b in blocks):
                rotated.draw_to(framebuffer, x_off, y_off)
                drawn += 1
            else:
                LOGGER.warning(
                    "Skipping %s rotation at (%d, %d): outside %dx%d framebuffer",
                    rotation.name,
                    x_off,
                    y_off,
                    framebuffer.width,
                    framebuffer.height,
                )
            x_off += box.width() + margin
    return drawn


__all__ = ["render_gallery", "DEFAULT_MARGIN"]
