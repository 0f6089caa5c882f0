"""Layout constants used across layout and routing modules."""

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------
GRID_UNIT: int = 100
"""Pixels per grid unit."""

BOX_WIDTH_UNITS: float = 2.5
"""Default box width in grid units, used to size the canvas."""

GAP_UNITS: float = 0.5
"""Horizontal gap between grid cells in grid units."""

VERTICAL_GAP_UNITS: float = 0.5
"""Vertical gap between grid rows in grid units."""

AXIS_OFFSET: int = 30
"""Offset between the axes and the diagram content."""

DEFAULT_COLOR: str = "#FFCE33"
"""Default (accent yellow) box color, used for the bottom row."""

STRETCH: float = 1.0
"""Horizontal stretch factor (1.0 = normal)."""

# ---------------------------------------------------------------------------
# Canvas margins
# ---------------------------------------------------------------------------
LEFT_MARGIN_BASE: int = 60
"""Left margin before the axis offset is added."""

BOTTOM_MARGIN_BASE: int = 50
"""Bottom margin before the axis offset is added."""

TOP_MARGIN: int = 50
"""Top margin above the first row."""

RIGHT_MARGIN: int = 20
"""Space to the right of the rightmost box."""

# ---------------------------------------------------------------------------
# Row gradient
# ---------------------------------------------------------------------------
GRADIENT_LIGHT_COLOR: str = "#FFFEF0"
"""Near-white tint that upper rows fade towards."""

GRADIENT_RANGE: float = 0.5
"""Fraction of the interpolation range used by the row gradient."""

# ---------------------------------------------------------------------------
# Text wrapping
# ---------------------------------------------------------------------------
CHAR_WIDTH_PIXELS: float = 16.0
"""Approximate width per character for box label wrapping."""

MIN_CHARS_PER_LINE: int = 1
"""Minimum characters per wrapped line."""

MAX_TEXT_LINES: int = 3
"""Maximum lines of wrapped label text."""

# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------
GROUP_PADDING: int = 15
"""Padding around member boxes inside a group rectangle."""

GROUP_LABEL_SPACE: int = 20
"""Extra vertical space above the members for the group label."""

# ---------------------------------------------------------------------------
# Legend sizing (affects canvas width)
# ---------------------------------------------------------------------------
LEGEND_SQUARE_SIZE: int = 30
"""Size of the colored legend square."""

LEGEND_TEXT_GAP: int = 12
"""Gap between a legend square and its label."""

LEGEND_PADDING: int = 10
"""Padding inside the legend area."""

LEGEND_CHAR_WIDTH: int = 8
"""Estimated pixel width per legend label character."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
STROKE_ADJUSTMENT: int = 2
"""Inset of arrow end points to account for the box stroke."""

BOX_COLLISION_BUFFER: int = 3
"""Inflation of box bounds for collision detection."""

MAX_DISTANCE_PENALTY: int = 50
"""Cap on the Manhattan distance penalty."""

DISTANCE_PENALTY_THRESHOLD: int = 500
"""Distance above which the capped penalty applies."""

FLOW_DOWN: str = "down"
"""Flow hint that favours vertically oriented routes."""
