"""Custom font embedding."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from pathlib import Path

from boxgrid.render.constants import FALLBACK_FONT_STACK, FONT_NAME_FORBIDDEN_CHARS

WOFF2_SUFFIX = ".woff2"


@dataclass(frozen=True)
class FontData:
    """A WOFF2 font, base64 encoded for a data URL."""

    name: str
    base64_data: str


def load_custom_font(path: str | Path) -> FontData:
    """Read a WOFF2 file; the font is named after the file.

    Raises OSError if the file cannot be read.
    """
    path = Path(path)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    name = path.name
    if len(name) > len(WOFF2_SUFFIX) and name.endswith(WOFF2_SUFFIX):
        name = name[: -len(WOFF2_SUFFIX)]
    return FontData(name=name, base64_data=encoded)


def sanitize_font_name(name: str) -> str:
    """Strip characters that could break out of a CSS string or the SVG."""
    return "".join(c for c in name if c not in FONT_NAME_FORBIDDEN_CHARS)


def font_family(font: FontData | None = None) -> str:
    if font is None:
        return FALLBACK_FONT_STACK
    return f"'{sanitize_font_name(font.name)}', {FALLBACK_FONT_STACK}"


def font_face_css(font: FontData) -> str:
    return (
        "@font-face {"
        f"font-family: '{sanitize_font_name(font.name)}';"
        f"src: url(data:font/woff2;base64,{font.base64_data});"
        "}"
    )
