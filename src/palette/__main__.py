"""
Print a randomly selected palette with its derived colors.

Usage:
    python -m palette
    python -m palette --seed 7 --randomize
    python -m palette --config my_palettes.yaml --log-level DEBUG

Output is one ``name: value`` pair per line (hex strings, uppercase).
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from common import settings  # type: ignore[import]
from common.logging import setup_default_logging  # type: ignore[import]
from util.utils import load_config  # type: ignore[import]

from .manager import PaletteManager


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="python -m palette", description="Pick a sketch palette")
    p.add_argument("--seed", type=int, default=None, help="random seed (overrides PXC_SEED)")
    p.add_argument("--randomize", action="store_true", help="shuffle colors within the palette")
    p.add_argument("--config", default=None, help="extra YAML config merged over the defaults")
    p.add_argument("--log-level", default=None, help="logging level (default: PXC_LOG_LEVEL)")
    return p


def format_report(pm: PaletteManager) -> List[str]:
    lines = [f"palette: {pm.palette_index}"]
    lines += [f"color{i}: {h}" for i, h in enumerate(pm.hex_palette())]
    lines.append(f"fg: {pm.to_hex_string(pm.fg)}")
    lines.append(f"bg: {pm.to_hex_string(pm.bg)}")
    lines.append(f"average: {pm.to_hex_string(pm.average_color())}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)

    pm = PaletteManager.from_config(
        load_config(args.config),
        seed=args.seed,
        randomize=True if args.randomize else None,
    )
    for line in format_report(pm):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
