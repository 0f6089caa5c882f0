"""Pixel-level data model produced by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxgrid.layout.constants import (
    AXIS_OFFSET,
    BOX_WIDTH_UNITS,
    DEFAULT_COLOR,
    GAP_UNITS,
    GRID_UNIT,
    STRETCH,
    VERTICAL_GAP_UNITS,
)
from boxgrid.layout.routing.common import RouteCandidate, Strategy
from boxgrid.parser.model import LegendEntry


@dataclass
class DiagramConfig:
    """Diagram-wide sizing settings."""

    grid_unit: int = GRID_UNIT
    box_width_units: float = BOX_WIDTH_UNITS
    gap_units: float = GAP_UNITS
    vertical_gap_units: float = VERTICAL_GAP_UNITS
    axis_offset: int = AXIS_OFFSET
    default_color: str = DEFAULT_COLOR
    stretch: float = STRETCH


def default_config() -> DiagramConfig:
    return DiagramConfig()


@dataclass
class Dimensions:
    """Canvas size and the grid metrics used to place boxes."""

    width: int
    height: int
    box_width: int
    box_height: int
    left_margin: int
    top_margin: int
    bottom_margin: int
    cell_units: float
    vertical_cell_units: float


@dataclass
class Box:
    """A placed, styled box. ``text`` holds the wrapped label."""

    x: int
    y: int
    width: int
    height: int
    text: str = ""
    color: str = ""
    border_color: str = ""
    border_width: int = 0
    font_size: int = 0
    text_color: str = ""
    id: str = ""

    @property
    def text_lines(self) -> list[str]:
        return self.text.split("\n")


@dataclass
class Arrow:
    """A routed arrow between two boxes."""

    from_x: int
    from_y: int
    to_x: int
    to_y: int
    vertical_first: bool
    num_segments: int
    from_box_id: str
    to_box_id: str
    strategy: Strategy
    candidates: list[RouteCandidate] = field(default_factory=list)
    selected_index: int = -1


@dataclass
class Group:
    """A labelled rectangle drawn around a set of boxes."""

    x: int
    y: int
    width: int
    height: int
    label: str
    box_ids: list[str] = field(default_factory=list)


@dataclass
class Diagram:
    """A fully resolved diagram, ready for rendering."""

    width: int
    height: int
    boxes: list[Box] = field(default_factory=list)
    arrows: list[Arrow] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)
    # (from_id, to_id, reason) for arrows the router could not place
    skipped_arrows: list[tuple[str, str, str]] = field(default_factory=list)
    x_label: str = ""
    y_label: str = ""
    legend: list[LegendEntry] = field(default_factory=list)
    custom_colors: dict[str, str] = field(default_factory=dict)
