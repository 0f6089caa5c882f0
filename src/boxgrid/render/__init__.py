"""SVG rendering of laid-out diagrams."""

from boxgrid.render.fonts import FontData, font_family, load_custom_font, sanitize_font_name
from boxgrid.render.style import DEFAULT_THEME, Theme
from boxgrid.render.svg import arrow_points, render_svg

__all__ = [
    "DEFAULT_THEME",
    "FontData",
    "Theme",
    "arrow_points",
    "font_family",
    "load_custom_font",
    "render_svg",
    "sanitize_font_name",
]
