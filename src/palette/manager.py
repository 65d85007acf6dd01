from __future__ import annotations

"""Palette selection and color helpers for sketches.

This module defines :class:`PaletteManager`, which owns a set of palettes,
keeps one of them as the current palette, derives a foreground/background
pair from it, and offers sampling and transform helpers over colors.
"""

import logging
import math
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np

from common import settings  # type: ignore[import]
from graphics import (  # type: ignore[import]
    Color,
    ColorLike,
    ColorMode,
    blue,
    brightness,
    color,
    color_mode,
    constrain,
    default_rng,
    fract,
    green,
    hex_byte,
    lerp,
    lerp_color,
    random_choice,
    red,
    shuffle,
)
from graphics import alpha as alpha_of  # type: ignore[import]
from util.color import is_hex_color_str  # type: ignore[import]
from util.utils import load_config  # type: ignore[import]

from .defaults import default_palettes

logger = logging.getLogger(__name__)

# (saturation, brightness) factors applied to the picked color.
BG_ADJUST = (1.5, 0.5)
FG_ADJUST = (0.75, 1.25)


def _is_config_color(entry: object) -> bool:
    if isinstance(entry, bool):
        return False
    if isinstance(entry, int):
        return 0 <= entry <= 0xFFFFFF
    return is_hex_color_str(entry)


class PaletteManager:
    """Owns a palette set and the currently selected palette.

    Attributes
    ----------
    palettes:
        Palette set as given (or the built-in defaults). Entries may be hex
        strings, packed ints or :class:`graphics.Color` values.
    palette:
        Current palette, always normalized to :class:`graphics.Color`.
    palette_index:
        Index of the current palette within ``palettes``.
    fg, bg:
        Foreground/background derived from one random pick of ``palette``.
    """

    def __init__(
        self,
        palettes: Optional[Sequence[Sequence[ColorLike]]] = None,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        randomize: bool = False,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        if seed is not None:
            rng = np.random.default_rng(seed)
        self._rng = rng

        source = palettes if palettes else default_palettes()
        self.palettes: List[List[ColorLike]] = [list(p) for p in source]
        for i, pal in enumerate(self.palettes):
            if not pal:
                raise ValueError(f"palette {i} is empty")

        self.palette: List[Color] = []
        self.palette_index = 0
        self.fg: Color
        self.bg: Color
        self.select_random_palette(randomize)

    @classmethod
    def from_config(
        cls,
        cfg: Optional[Dict[str, Any]] = None,
        *,
        seed: Optional[int] = None,
        randomize: Optional[bool] = None,
    ) -> "PaletteManager":
        """Build a manager from the ``palette`` section of the YAML config.

        Precedence for ``seed``/``randomize``: explicit arguments, then
        ``PXC_SEED``/``PXC_RANDOMIZE``, then the config keys.
        """
        if cfg is None:
            cfg = load_config()
        section = cfg.get("palette") or {}
        if not isinstance(section, dict):
            raise ValueError("config 'palette' must be a mapping")

        palettes = section.get("palettes") or None
        if palettes is not None:
            if not isinstance(palettes, list) or not all(isinstance(p, list) for p in palettes):
                raise ValueError("config 'palette.palettes' must be a list of lists")
            for i, pal in enumerate(palettes):
                for entry in pal:
                    if not _is_config_color(entry):
                        raise ValueError(f"config palette {i}: invalid color {entry!r}")

        s = settings.get()
        if seed is None:
            seed = s.SEED if s.SEED is not None else section.get("seed")
        if randomize is None:
            if s.RANDOMIZE is not None:
                randomize = s.RANDOMIZE
            else:
                randomize = bool(section.get("randomize", False))
        return cls(palettes, seed=seed, randomize=randomize)

    @property
    def rng(self) -> np.random.Generator:
        """Generator used for picks; falls back to :func:`graphics.default_rng`."""
        return self._rng if self._rng is not None else default_rng()

    # --- selection ---
    def select_random_palette(self, randomize: bool = False) -> None:
        """Make a random palette current and derive ``fg``/``bg`` from it.

        Parameters
        ----------
        randomize:
            Also shuffle the order of colors within the chosen palette.
        """
        index = random_choice(range(len(self.palettes)), self.rng)
        pal = [self.resolve_color(c) for c in self.palettes[index]]
        if randomize:
            pal = shuffle(pal, self.rng)

        pick = random_choice(pal, self.rng)
        # bg must come from the unadjusted pick.
        bg = self.adjust_brightness(self.adjust_saturation(pick, BG_ADJUST[0]), BG_ADJUST[1])
        fg = self.adjust_brightness(self.adjust_saturation(pick, FG_ADJUST[0]), FG_ADJUST[1])

        # state changes only once everything above succeeded
        self.palette_index, self.palette, self.bg, self.fg = index, pal, bg, fg
        logger.debug(
            "palette %d/%d selected (randomize=%s) fg=%s bg=%s",
            self.palette_index,
            len(self.palettes),
            randomize,
            self.to_hex_string(self.fg),
            self.to_hex_string(self.bg),
        )

    def randomize_palette(self) -> None:
        """Shuffle the order of colors in the current palette."""
        self.palette = shuffle(self.palette, self.rng)

    # --- queries ---
    def resolve_color(self, value: ColorLike, alpha: Optional[float] = None) -> Color:
        """Normalize a hex string, packed int or Color; optionally set its alpha."""
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            clr = color(value)
        elif isinstance(value, Color):
            clr = value
        else:
            raise TypeError(f"unsupported color value: {value!r}")
        if alpha is not None:
            clr = clr.with_alpha(alpha)
        return clr

    def pick_random_color(self) -> Color:
        return random_choice(self.palette, self.rng)

    def to_hex_string(self, clr: ColorLike) -> str:
        """Return ``#RRGGBB``, or ``#RRGGBBAA`` when the color is not fully opaque."""
        c = self.resolve_color(clr)
        out = "#" + hex_byte(red(c)) + hex_byte(green(c)) + hex_byte(blue(c))
        if c.levels[3] < 255:
            out += hex_byte(alpha_of(c))
        return out.upper()

    def hex_palette(self) -> List[str]:
        return [self.to_hex_string(c) for c in self.palette]

    def lerp_from_palette(
        self, f: float, palette: Optional[Sequence[ColorLike]] = None
    ) -> Color:
        """Sample the palette as a closed loop of colors.

        ``f`` in [0, 1) walks once around the palette; the last color blends
        back into the first. Any real ``f`` is accepted and wraps around.
        """
        arr = palette if palette else self.palette
        n = len(arr)
        pos = f * n
        i1 = math.floor(pos) % n
        i2 = (i1 + 1) % n
        c1 = self.resolve_color(arr[i1])
        c2 = self.resolve_color(arr[i2])
        return lerp_color(c1, c2, fract(pos))

    # --- transforms ---
    def adjust_saturation(self, clr: ColorLike, factor: float = 1) -> Color:
        """Move channels away from (``factor > 1``) or toward (``< 1``) gray.

        The result is fully opaque.
        """
        c = self.resolve_color(clr)
        br = brightness(c)
        return color(
            constrain(lerp(br, red(c), factor), 0, 255),
            constrain(lerp(br, green(c), factor), 0, 255),
            constrain(lerp(br, blue(c), factor), 0, 255),
        )

    def adjust_brightness(self, clr: ColorLike, factor: float = 1) -> Color:
        """Scale RGB channels by ``factor``. The result is fully opaque."""
        c = self.resolve_color(clr)
        return color(
            constrain(red(c) * factor, 0, 255),
            constrain(green(c) * factor, 0, 255),
            constrain(blue(c) * factor, 0, 255),
        )

    def average_color(self, limit: float = 255) -> Color:
        """Mean RGB of the current palette, scaled so no channel exceeds ``limit``."""
        pal = self.palette
        s_r = s_g = s_b = 0.0
        for clr in pal:
            c = self.resolve_color(clr)
            s_r += red(c)
            s_g += green(c)
            s_b += blue(c)
        s_r /= len(pal)
        s_g /= len(pal)
        s_b /= len(pal)
        s_max = max(s_r, s_g, s_b)
        if s_max > limit:
            k = limit / s_max
            s_r *= k
            s_g *= k
            s_b *= k
        with color_mode(ColorMode.RGB):
            return color(s_r, s_g, s_b)

    # --- sequence protocol over the current palette ---
    def __len__(self) -> int:
        return len(self.palette)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.palette)

    def __getitem__(self, index: int) -> Color:
        return self.palette[index]

    def __repr__(self) -> str:
        return (
            f"PaletteManager(palette={self.palette_index}/{len(self.palettes)}, "
            f"colors={self.hex_palette()!r})"
        )


__all__ = ["PaletteManager", "BG_ADJUST", "FG_ADJUST"]
