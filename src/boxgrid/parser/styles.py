"""Style code lookup for boxes.

Style codes are short dash-joined tokens following the label, e.g.
``Review, rb-g`` for a red border on a gray background. Codes missing from
the built-in table fall back to the custom colors defined in front matter:
``green`` sets the background, ``greent`` sets the text color.
"""

from __future__ import annotations

from boxgrid.parser.model import BoxStyles

RED = "#FF0000"
GRAY = "#D3D3D3"
PURPLE = "#ecbae6"
LIGHT_PURPLE = "#f5dbf2"

# code -> attribute overrides applied on top of the current BoxStyles
STYLE_TABLE: dict[str, dict[str, str | int]] = {
    "rb": {"border_color": RED, "border_width": 3},
    "g": {"background_color": GRAY},
    "p": {"background_color": PURPLE},
    "lp": {"background_color": LIGHT_PURPLE},
    "nbb": {"background_color": "none", "border_color": "none", "border_width": 0},
    "rt": {"text_color": RED},
    "2t": {"font_size": 48},
}


def _apply_custom_color(
    styles: BoxStyles, code: str, custom_colors: dict[str, str] | None
) -> None:
    if not custom_colors:
        return
    if code in custom_colors:
        styles.background_color = custom_colors[code]
    elif code.endswith("t") and code[:-1] in custom_colors:
        styles.text_color = custom_colors[code[:-1]]


def parse_box_styles(
    style_str: str, custom_colors: dict[str, str] | None = None
) -> BoxStyles:
    """Parse a style string such as ``"rb-g-rt"`` into BoxStyles.

    Later codes override earlier ones for the same attribute. Unknown codes
    that are not custom colors are ignored.
    """
    styles = BoxStyles()
    if not style_str:
        return styles

    for code in style_str.split("-"):
        code = code.strip()
        overrides = STYLE_TABLE.get(code)
        if overrides is None:
            _apply_custom_color(styles, code, custom_colors)
            continue
        for attr, value in overrides.items():
            setattr(styles, attr, value)

    return styles
