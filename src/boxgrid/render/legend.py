"""Legend rendering for box diagram SVGs."""

from __future__ import annotations

import drawsvg as draw

from boxgrid.layout.constants import (
    LEGEND_PADDING,
    LEGEND_SQUARE_SIZE,
    LEGEND_TEXT_GAP,
)
from boxgrid.layout.model import Diagram
from boxgrid.parser.styles import parse_box_styles
from boxgrid.render.constants import LEGEND_LINE_HEIGHT, LEGEND_TOP_MARGIN
from boxgrid.render.fonts import FontData, font_family
from boxgrid.render.style import Theme


def legend_color(style: str, custom_colors: dict[str, str], theme: Theme) -> str:
    """Swatch colour for a legend style code."""
    color = parse_box_styles(style, custom_colors).background_color
    if color in ("", "none"):
        return theme.default_box_color
    return color


def render_legend(
    drawing: draw.Drawing,
    diagram: Diagram,
    theme: Theme,
    font: FontData | None = None,
) -> None:
    """Render legend entries right-aligned in the top-right corner.

    Each entry is a colour square with its label to the left.
    """
    if not diagram.legend:
        return

    start_x = diagram.width - LEGEND_PADDING
    for i, entry in enumerate(diagram.legend):
        y = LEGEND_TOP_MARGIN + i * LEGEND_LINE_HEIGHT
        square_x = start_x - LEGEND_SQUARE_SIZE

        drawing.append(
            draw.Rectangle(
                square_x,
                y,
                LEGEND_SQUARE_SIZE,
                LEGEND_SQUARE_SIZE,
                fill=legend_color(entry.style, diagram.custom_colors, theme),
                stroke=theme.stroke_color,
                stroke_width=theme.legend_square_stroke_width,
            )
        )
        drawing.append(
            draw.Text(
                entry.label,
                theme.legend_font_size,
                square_x - LEGEND_TEXT_GAP,
                y + LEGEND_SQUARE_SIZE // 2,
                font_family=font_family(font),
                text_anchor="end",
                dominant_baseline="middle",
            )
        )
