"""Minimal host graphics primitives for palette code.

Re-exports the color value type, its constructor and channel helpers, the
ambient color mode, and the random/scalar helpers so callers can import from
``graphics`` directly.
"""

from .color import (
    Color,
    ColorLike,
    alpha,
    blue,
    brightness,
    color,
    green,
    hex_byte,
    lerp_color,
    red,
)
from .mathutil import constrain, fract, lerp
from .mode import ColorMode, color_mode, get_color_mode, pop, push, set_color_mode
from .rand import default_rng, random_choice, random_seed, shuffle

__all__ = [
    "Color",
    "ColorLike",
    "color",
    "red",
    "green",
    "blue",
    "alpha",
    "brightness",
    "lerp_color",
    "hex_byte",
    "constrain",
    "lerp",
    "fract",
    "ColorMode",
    "color_mode",
    "get_color_mode",
    "set_color_mode",
    "push",
    "pop",
    "random_seed",
    "default_rng",
    "random_choice",
    "shuffle",
]
