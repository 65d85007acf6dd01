"""Public entrypoint for the palette library.

Re-exports the built-in palette set and :class:`PaletteManager` so that
sketches can simply ``from palette import PaletteManager``.
"""

from .defaults import DEFAULT_PALETTES, default_palettes
from .manager import BG_ADJUST, FG_ADJUST, PaletteManager

__all__ = [
    "DEFAULT_PALETTES",
    "default_palettes",
    "PaletteManager",
    "BG_ADJUST",
    "FG_ADJUST",
]
