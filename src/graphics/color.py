from __future__ import annotations

"""Color value type and the host-style primitives that operate on it.

This module defines :class:`Color`, an immutable RGBA value on the 0–255
channel scale, and the small set of functions palette code relies on:
construction (:func:`color`), channel readers, :func:`brightness`,
:func:`lerp_color` and :func:`hex_byte`.
"""

import colorsys
from dataclasses import dataclass, replace
from numbers import Real
from typing import Tuple, Union

from util.color import parse_hex_color_str, unpack_rgb_int  # type: ignore[import]

from .mathutil import constrain
from .mode import ColorMode, get_color_mode

RGBA = Tuple[float, float, float, float]

# HSB maxes for (hue, saturation, brightness); alpha stays on 0–255.
HSB_MAXES = (360.0, 100.0, 100.0)


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in [0, 255].

    Attributes
    ----------
    r, g, b:
        Red, green and blue channels.
    a:
        Alpha channel; 255 is fully opaque.
    """

    r: float
    g: float
    b: float
    a: float = 255.0

    @property
    def rgba(self) -> RGBA:
        return (self.r, self.g, self.b, self.a)

    @property
    def levels(self) -> Tuple[int, int, int, int]:
        """Channels rounded to integers and clamped to [0, 255]."""
        return tuple(int(round(constrain(v, 0.0, 255.0))) for v in self.rgba)  # type: ignore[return-value]

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with the alpha channel replaced."""
        return replace(self, a=float(alpha))

    def __str__(self) -> str:
        r, g, b, a = self.levels
        return f"rgba({r}, {g}, {b}, {a})"


ColorLike = Union[str, int, Color]


def _from_hsb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    hmax, smax, vmax = HSB_MAXES
    hh = (float(h) % hmax) / hmax
    ss = constrain(float(s) / smax, 0.0, 1.0)
    vv = constrain(float(v) / vmax, 0.0, 1.0)
    r, g, b = colorsys.hsv_to_rgb(hh, ss, vv)
    return (r * 255.0, g * 255.0, b * 255.0)


def color(*args: object) -> Color:
    """Construct a :class:`Color`.

    Accepted forms:

    - ``color(Color)`` returns the value unchanged.
    - ``color("#RRGGBB")`` and the other hex forms of
      :func:`util.color.parse_hex_color_str`.
    - ``color(0xRRGGBB)`` packed integer, fully opaque.
    - ``color(v1, v2, v3[, alpha])`` read in the active :class:`ColorMode`;
      alpha is always on the 0–255 scale.

    Raises
    ------
    ValueError
        Malformed hex string or out-of-range packed integer.
    TypeError
        Unsupported argument type or arity.
    """
    if len(args) == 1:
        value = args[0]
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            r, g, b, a = parse_hex_color_str(value)
            return Color(float(r), float(g), float(b), float(a))
        if isinstance(value, int) and not isinstance(value, bool):
            r, g, b, a = unpack_rgb_int(value)
            return Color(float(r), float(g), float(b), float(a))
        raise TypeError(f"unsupported color value: {value!r}")

    if len(args) in (3, 4):
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in args):
            raise TypeError(f"color components must be real numbers: {args!r}")
        v1, v2, v3 = (float(v) for v in args[:3])  # type: ignore[arg-type]
        a = float(args[3]) if len(args) == 4 else 255.0  # type: ignore[arg-type]
        if get_color_mode() is ColorMode.HSB:
            v1, v2, v3 = _from_hsb(v1, v2, v3)
        return Color(
            constrain(v1, 0.0, 255.0),
            constrain(v2, 0.0, 255.0),
            constrain(v3, 0.0, 255.0),
            constrain(a, 0.0, 255.0),
        )

    raise TypeError(f"color() takes 1, 3 or 4 arguments ({len(args)} given)")


def red(c: Color) -> float:
    return c.r


def green(c: Color) -> float:
    return c.g


def blue(c: Color) -> float:
    return c.b


def alpha(c: Color) -> float:
    return c.a


def brightness(c: Color) -> float:
    """HSB brightness expressed on the channel scale, i.e. ``max(r, g, b)``."""
    return max(c.r, c.g, c.b)


def lerp_color(c1: Color, c2: Color, amt: float) -> Color:
    """Blend all four channels linearly; ``amt`` is clamped to [0, 1]."""
    t = constrain(float(amt), 0.0, 1.0)
    return Color(*(x + (y - x) * t for x, y in zip(c1.rgba, c2.rgba)))


def hex_byte(value: float) -> str:
    """Format one channel as two uppercase hex digits."""
    return f"{int(round(constrain(value, 0.0, 255.0))):02X}"


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
]
