"""Data model for parsed box diagrams (grid coordinates only)."""

from __future__ import annotations

from dataclasses import dataclass, field

INTERNAL_ID_PREFIX = "_box_"
"""Prefix for ids generated for boxes declared without an explicit id."""


@dataclass(frozen=True)
class ParsedCoordinate:
    """One axis of a box coordinate, before resolution."""

    is_relative: bool
    value: int


@dataclass
class BoxStyles:
    """Visual overrides resolved from a box's style codes.

    Empty strings and zeros mean "use the renderer default".
    """

    background_color: str = ""
    border_color: str = ""
    border_width: int = 0
    font_size: int = 0
    text_color: str = ""


@dataclass(frozen=True)
class BoxSpec:
    """A box positioned on the grid."""

    id: str
    grid_x: int
    grid_y: int
    grid_width: float = 2.0
    grid_height: int = 1
    label: str = ""
    color: str = ""
    border_color: str = ""
    border_width: int = 0
    font_size: int = 0
    text_color: str = ""
    touch_left: bool = False
    group: str = ""


@dataclass(frozen=True)
class ArrowSpec:
    """A logical connection between two boxes."""

    from_id: str
    to_id: str
    flow: str = ""


@dataclass
class GroupDef:
    """A visual group surrounding a set of boxes."""

    name: str
    label: str
    box_ids: list[str] = field(default_factory=list)


@dataclass
class DiagramSpec:
    """Complete logical diagram: boxes, arrows and groups in document order."""

    boxes: list[BoxSpec] = field(default_factory=list)
    arrows: list[ArrowSpec] = field(default_factory=list)
    groups: list[GroupDef] = field(default_factory=list)

    def box_ids(self) -> list[str]:
        return [box.id for box in self.boxes]


@dataclass(frozen=True)
class LegendEntry:
    """A legend item mapping a style code to a description."""

    style: str
    label: str


@dataclass
class Frontmatter:
    """Metadata parsed from the top of a diagram file."""

    font: str = ""
    x_label: str = ""
    y_label: str = ""
    legend: list[LegendEntry] = field(default_factory=list)
    colors: dict[str, str] = field(default_factory=dict)
    arrow_flow: str = ""
