"""Grid to pixel conversion and canvas sizing."""

from __future__ import annotations

from boxgrid.layout.constants import (
    BOTTOM_MARGIN_BASE,
    LEFT_MARGIN_BASE,
    LEGEND_CHAR_WIDTH,
    LEGEND_PADDING,
    LEGEND_SQUARE_SIZE,
    LEGEND_TEXT_GAP,
    RIGHT_MARGIN,
    TOP_MARGIN,
)
from boxgrid.layout.model import DiagramConfig, Dimensions
from boxgrid.parser.model import LegendEntry


def calculate_dimensions(
    max_grid_x: int, max_grid_y: int, config: DiagramConfig
) -> Dimensions:
    """Compute canvas size and grid metrics for the given grid extent.

    The width assumes the rightmost column holds a box of the configured
    default width; wider boxes in that column may overhang the canvas.
    """
    cell_units = (1.0 + config.gap_units) * config.stretch
    vertical_cell_units = 1.0 + config.vertical_gap_units

    left_margin = LEFT_MARGIN_BASE + config.axis_offset
    bottom_margin = BOTTOM_MARGIN_BASE + config.axis_offset
    top_margin = TOP_MARGIN

    content_width = int(
        ((max_grid_x - 1) * cell_units + config.box_width_units * config.stretch)
        * config.grid_unit
    )
    content_height = int(max_grid_y * vertical_cell_units * config.grid_unit)

    return Dimensions(
        width=left_margin + content_width + RIGHT_MARGIN,
        height=bottom_margin + content_height + top_margin,
        box_width=int(config.box_width_units * config.grid_unit),
        box_height=config.grid_unit,
        left_margin=left_margin,
        top_margin=top_margin,
        bottom_margin=bottom_margin,
        cell_units=cell_units,
        vertical_cell_units=vertical_cell_units,
    )


def estimate_legend_width(legend: list[LegendEntry] | None) -> int:
    """Extra canvas width reserved for the legend, 0 without entries."""
    if not legend:
        return 0
    longest = max(len(entry.label) for entry in legend)
    return (
        longest * LEGEND_CHAR_WIDTH
        + LEGEND_SQUARE_SIZE
        + LEGEND_TEXT_GAP
        + LEGEND_PADDING * 2
    )


def grid_to_pixel_x(grid_x: int, dims: Dimensions, config: DiagramConfig) -> int:
    return dims.left_margin + int((grid_x - 1) * dims.cell_units * config.grid_unit)


def grid_to_pixel_y(grid_y: int, dims: Dimensions, config: DiagramConfig) -> int:
    return dims.top_margin + int(
        (grid_y - 1) * dims.vertical_cell_units * config.grid_unit
    )


def calculate_box_width(
    grid_width: float, dims: Dimensions, config: DiagramConfig
) -> int:
    """Pixel width of a box spanning *grid_width* cells, minus one gap."""
    return int(
        (grid_width * dims.cell_units - config.gap_units * config.stretch)
        * config.grid_unit
    )


def calculate_box_height(grid_height: int, config: DiagramConfig) -> int:
    return grid_height * config.grid_unit


def calculate_touch_extension(config: DiagramConfig) -> int:
    """How far a touch-left pair each reaches into the gap between them."""
    return int(config.gap_units / 2.0 * config.grid_unit)
