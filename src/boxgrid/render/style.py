"""Theme and style constants for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass

from boxgrid.layout.constants import DEFAULT_COLOR


@dataclass
class Theme:
    """Visual theme for a box diagram."""

    name: str
    background_color: str = "#fff"
    stroke_color: str = "#000"
    # Boxes
    box_stroke_width: int = 2
    box_font_size: int = 24
    box_font_weight: str = "normal"
    default_box_color: str = DEFAULT_COLOR
    # Arrows and axes
    arrow_stroke_width: int = 2
    arrowhead_stroke_width: float = 1.5
    axis_font_size: int = 18
    # Groups
    group_stroke_width: float = 1.5
    group_font_size: int = 24
    # Legend
    legend_square_stroke_width: int = 1
    legend_font_size: int = 28


DEFAULT_THEME = Theme(name="default")
