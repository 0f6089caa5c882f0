"""Shared types and collision helpers for arrow routing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from boxgrid.layout.constants import BOX_COLLISION_BUFFER

COLLISION_DETECTED = "collision_detected"


class RoutingError(ValueError):
    """Raised when no valid route exists between two boxes."""


class Strategy(Enum):
    """Routing strategies, in candidate generation order."""

    STRAIGHT_VERTICAL = "straight_vertical"
    TWO_SEGMENT_HORIZONTAL_FIRST = "two_segment_horizontal_first"
    TWO_SEGMENT_VERTICAL_FIRST = "two_segment_vertical_first"
    THREE_SEGMENT_HORIZONTAL_FIRST = "three_segment_horizontal_first"
    NON_OVERLAPPING_HORIZONTAL = "non_overlapping_horizontal"
    THREE_SEGMENT_VERTICAL_FIRST = "three_segment_vertical_first"


@dataclass
class BoxData:
    """Resolved pixel geometry of a placed box, as seen by the router."""

    id: str
    grid_x: int
    grid_y: int
    pixel_x: int
    pixel_y: int
    width: int
    height: int
    center_x: int = 0
    center_y: int = 0

    def __post_init__(self) -> None:
        self.recenter()

    def recenter(self) -> None:
        self.center_x = self.pixel_x + self.width // 2
        self.center_y = self.pixel_y + self.height // 2

    @property
    def coords(self) -> BoxCoords:
        return BoxCoords(
            x1=self.pixel_x,
            y1=self.pixel_y,
            x2=self.pixel_x + self.width,
            y2=self.pixel_y + self.height,
        )


@dataclass(frozen=True)
class BoxCoords:
    """Bounding rectangle of a box (x1, y1 top-left; x2, y2 bottom-right)."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def center_x(self) -> int:
        return (self.x1 + self.x2) // 2

    @property
    def center_y(self) -> int:
        return (self.y1 + self.y2) // 2


@dataclass
class RouteCandidate:
    """A fully geometrized arrow path considered before selection."""

    strategy: Strategy
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    vertical_first: bool
    segments: list[tuple[int, int]]
    box_width1: int = 0
    box_width2: int = 0
    flow: str = ""
    score: int = 0
    rejected: bool = False
    reject_reason: str = ""

    @property
    def num_segments(self) -> int:
        return len(self.segments) - 1


@dataclass
class RoutingPlan:
    """The winning route for one arrow plus every candidate considered."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int
    strategy: Strategy
    vertical_first: bool
    num_segments: int
    candidates: list[RouteCandidate] = field(default_factory=list)
    selected_index: int = -1

    @property
    def selected(self) -> RouteCandidate | None:
        if 0 <= self.selected_index < len(self.candidates):
            return self.candidates[self.selected_index]
        return None


def check_segment_collision(
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    all_boxes: list[BoxData],
    exclude_ids: set[str] | None = None,
) -> bool:
    """Return True if an axis-aligned segment overlaps any non-excluded box.

    Box bounds are inflated by BOX_COLLISION_BUFFER on every side. The segment
    collides when its bounding interval overlaps the inflated box on both axes.
    """
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1

    for box in all_boxes:
        if exclude_ids and box.id in exclude_ids:
            continue

        left = box.pixel_x - BOX_COLLISION_BUFFER
        right = box.pixel_x + box.width + BOX_COLLISION_BUFFER
        top = box.pixel_y - BOX_COLLISION_BUFFER
        bottom = box.pixel_y + box.height + BOX_COLLISION_BUFFER

        if x1 <= right and x2 >= left and y1 <= bottom and y2 >= top:
            return True
    return False


def check_path_collision(
    points: list[tuple[int, int]],
    all_boxes: list[BoxData],
    from_id: str,
    to_id: str,
) -> bool:
    """Return True if any segment of a polyline hits a box other than the endpoints."""
    exclude_ids = {from_id, to_id}
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if check_segment_collision(x1, y1, x2, y2, all_boxes, exclude_ids):
            return True
    return False
