"""Terminal size lookup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO, Tuple

LOGGER = logging.getLogger(__name__)

FALLBACK_SIZE: Tuple[int, int] = (40, 40)


def terminal_size(
    fallback: Tuple[int, int] = FALLBACK_SIZE, stream: Optional[TextIO] = None
) -> Tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal behind ``stream``.

    ``stream`` defaults to stdout.  When it is not a terminal the ``fallback``
    size is returned instead; the failure is logged and never propagated.
    """

    out = stream if stream is not None else sys.stdout
    try:
        size = os.get_terminal_size(out.fileno())
    except (OSError, ValueError, AttributeError) as exc:
        LOGGER.warning("Could not query terminal size (%s); using %dx%d", exc, *fallback)
        return fallback
    return size.columns, size.lines


__all__ = ["terminal_size", "FALLBACK_SIZE"]
