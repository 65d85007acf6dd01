from __future__ import annotations

"""Ambient color-interpretation mode.

Three-number :func:`graphics.color` calls are read according to the current
:class:`ColorMode`, which is process-global state in the same way a sketch
host keeps it. Code that needs a specific interpretation for a short span
should use :func:`color_mode` so the previous mode is restored on every exit
path.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List

logger = logging.getLogger(__name__)


class ColorMode(Enum):
    """How ``color(v1, v2, v3)`` interprets its arguments."""

    RGB = "rgb"
    HSB = "hsb"


_mode: ColorMode = ColorMode.RGB
_stack: List[ColorMode] = []


def get_color_mode() -> ColorMode:
    """Return the active color mode."""
    return _mode


def set_color_mode(mode: ColorMode | str) -> None:
    """Set the active color mode (accepts the enum or its value, e.g. ``"hsb"``)."""
    global _mode
    _mode = mode if isinstance(mode, ColorMode) else ColorMode(str(mode).lower())


def push() -> None:
    """Save the active color mode on the mode stack."""
    _stack.append(_mode)


def pop() -> None:
    """Restore the most recently pushed color mode."""
    global _mode
    if not _stack:
        raise RuntimeError("pop() called without a matching push()")
    _mode = _stack.pop()


@contextmanager
def color_mode(mode: ColorMode | str) -> Iterator[ColorMode]:
    """Temporarily switch the color mode.

    The previous mode is restored when the block exits, including when it
    raises.
    """
    push()
    try:
        set_color_mode(mode)
        logger.debug("color mode -> %s", _mode.value)
        yield _mode
    finally:
        pop()


__all__ = ["ColorMode", "get_color_mode", "set_color_mode", "push", "pop", "color_mode"]
