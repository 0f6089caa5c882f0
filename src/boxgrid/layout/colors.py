"""Hex colour helpers and the default row gradient."""

from __future__ import annotations

import re

from boxgrid.layout.constants import (
    DEFAULT_COLOR,
    GRADIENT_LIGHT_COLOR,
    GRADIENT_RANGE,
)

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


def parse_hex_color(color: str) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` (``#`` optional) into an RGB triple.

    Anything that is not six hex digits yields black.
    """
    digits = color[1:] if color.startswith("#") else color
    if not _HEX_RE.fullmatch(digits):
        return (0, 0, 0)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def interpolate_color(color1: str, color2: str, factor: float) -> str:
    """Blend two colours; factor 0.0 gives *color1*, 1.0 gives *color2*."""
    r1, g1, b1 = parse_hex_color(color1)
    r2, g2, b2 = parse_hex_color(color2)
    return rgb_to_hex(
        int(r1 + (r2 - r1) * factor),
        int(g1 + (g2 - g1) * factor),
        int(b1 + (b2 - b1) * factor),
    )


def gradient_color(
    grid_y: int, max_grid_y: int, base_color: str = DEFAULT_COLOR
) -> str:
    """Default fill for a box in row *grid_y*.

    The bottom row gets *base_color*; rows above fade towards the light
    tint, using only GRADIENT_RANGE of the full blend.
    """
    if max_grid_y <= 1:
        return base_color
    factor = (max_grid_y - grid_y) / (max_grid_y - 1) * GRADIENT_RANGE
    return interpolate_color(base_color, GRADIENT_LIGHT_COLOR, factor)
