"""Layout engine: grid placement and arrow routing."""

from boxgrid.layout.engine import compute_layout, resolve_groups
from boxgrid.layout.grid import calculate_dimensions, estimate_legend_width
from boxgrid.layout.model import (
    Arrow,
    Box,
    Diagram,
    DiagramConfig,
    Dimensions,
    Group,
    default_config,
)

__all__ = [
    "Arrow",
    "Box",
    "Diagram",
    "DiagramConfig",
    "Dimensions",
    "Group",
    "calculate_dimensions",
    "compute_layout",
    "default_config",
    "estimate_legend_width",
    "resolve_groups",
]
