"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
AXIS_X: int = 60
"""X position of the vertical axis line."""

AXIS_MARGIN: int = 50
"""Distance of the horizontal axis from the bottom edge, and of the vertical
axis end from the top edge."""

AXIS_RIGHT_INSET: int = 20
"""Distance of the horizontal axis end from the right edge."""

Y_AXIS_LABEL_POS: int = 30
"""X and Y of the rotated y-axis label anchor."""

X_AXIS_LABEL_INSET_X: int = 30
"""Distance of the x-axis label anchor from the right edge."""

X_AXIS_LABEL_INSET_Y: int = 20
"""Distance of the x-axis label baseline from the bottom edge."""

# ---------------------------------------------------------------------------
# Arrowhead marker
# ---------------------------------------------------------------------------
ARROWHEAD_ID: str = "arrowhead"
"""Element id of the shared arrowhead marker."""

ARROWHEAD_POINTS: tuple[float, ...] = (0, 0.5, 8, 5.5, 0, 10.4)
"""Open chevron drawn inside the marker viewBox."""

ARROWHEAD_REF_X: float = 8
"""Marker reference X (the chevron tip)."""

ARROWHEAD_REF_Y: float = 5.5
"""Marker reference Y (the chevron tip)."""

# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------
GROUP_DASH: str = "6,4"
"""Dash pattern of group outlines."""

GROUP_CORNER_RADIUS: int = 8
"""Corner radius of group outlines."""

GROUP_LABEL_OFFSET_X: int = 10
"""Label X offset from the group's left edge."""

GROUP_LABEL_OFFSET_Y: int = 24
"""Label baseline offset from the group's top edge."""

# ---------------------------------------------------------------------------
# Box text
# ---------------------------------------------------------------------------
BASE_FONT_SIZE: int = 24
"""Font size the line height ratio is defined against."""

BASE_LINE_HEIGHT: int = 28
"""Line height at BASE_FONT_SIZE; scales with the font size."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: int = 44
"""Vertical spacing between legend entries."""

LEGEND_TOP_MARGIN: int = 50
"""Y of the first legend entry."""

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
FALLBACK_FONT_STACK: str = (
    "'Arial Narrow', 'Helvetica Neue Condensed', 'Ubuntu Condensed', "
    "'Liberation Sans Narrow', Impact, sans-serif"
)
"""Condensed font stack used when no custom font is embedded."""

FONT_NAME_FORBIDDEN_CHARS: str = "'\"\\<>;{}"
"""Characters stripped from custom font names before they reach CSS."""
