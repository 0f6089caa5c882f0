"""Candidate route generation.

Each generator inspects the relative grid position of the two boxes and
either returns one orthogonal candidate or None. Generation order matters:
scoring ties are broken in favour of the candidate generated first.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from boxgrid.layout.constants import FLOW_DOWN, STROKE_ADJUSTMENT
from boxgrid.layout.routing.common import BoxCoords, RouteCandidate, Strategy


@dataclass(frozen=True)
class RouteRequest:
    """Geometry and grid positions of the two boxes an arrow connects."""

    source: BoxCoords
    target: BoxCoords
    from_grid_x: int
    from_grid_y: int
    to_grid_x: int
    to_grid_y: int
    flow: str = ""

    @property
    def same_column(self) -> bool:
        return self.from_grid_x == self.to_grid_x

    @property
    def same_row(self) -> bool:
        return self.from_grid_y == self.to_grid_y

    @property
    def going_down(self) -> bool:
        return self.to_grid_y > self.from_grid_y

    @property
    def going_right(self) -> bool:
        return self.to_grid_x > self.from_grid_x

    def candidate(
        self,
        strategy: Strategy,
        segments: list[tuple[int, int]],
        vertical_first: bool,
    ) -> RouteCandidate:
        (start_x, start_y), (end_x, end_y) = segments[0], segments[-1]
        return RouteCandidate(
            strategy=strategy,
            start_x=start_x,
            start_y=start_y,
            end_x=end_x,
            end_y=end_y,
            vertical_first=vertical_first,
            segments=segments,
            box_width1=self.source.width,
            box_width2=self.target.width,
            flow=self.flow,
        )


def _vertical_ends(req: RouteRequest) -> tuple[int, int]:
    """Exit Y on the source and entry Y on the target for vertical travel."""
    if req.going_down:
        return req.source.y2, req.target.y1 - STROKE_ADJUSTMENT
    return req.source.y1, req.target.y2 + STROKE_ADJUSTMENT


def _horizontal_ends(req: RouteRequest) -> tuple[int, int]:
    """Exit X on the source and entry X on the target for horizontal travel."""
    if req.going_right:
        return req.source.x2, req.target.x1 - STROKE_ADJUSTMENT
    return req.source.x1, req.target.x2 + STROKE_ADJUSTMENT


def straight_vertical(req: RouteRequest) -> RouteCandidate | None:
    if not req.same_column or req.same_row:
        return None
    sy, ey = _vertical_ends(req)
    segments = [(req.source.center_x, sy), (req.target.center_x, ey)]
    return req.candidate(Strategy.STRAIGHT_VERTICAL, segments, vertical_first=True)


def two_segment_horizontal_first(req: RouteRequest) -> RouteCandidate | None:
    """Same column: leave sideways at mid-height, then drop into the target."""
    if not req.same_column or req.same_row:
        return None
    # Same column: always exit on the right
    sx = req.source.x2
    sy = req.source.center_y
    ex = req.target.center_x
    _, ey = _vertical_ends(req)
    segments = [(sx, sy), (ex, sy), (ex, ey)]
    return req.candidate(
        Strategy.TWO_SEGMENT_HORIZONTAL_FIRST, segments, vertical_first=False
    )


def two_segment_vertical_first(req: RouteRequest) -> RouteCandidate | None:
    if req.same_row:
        return None
    sx = req.source.center_x
    sy, _ = _vertical_ends(req)
    if req.going_right:
        ex = req.target.x1 - STROKE_ADJUSTMENT
    else:
        ex = req.target.x2 + STROKE_ADJUSTMENT
    ey = req.target.center_y
    segments = [(sx, sy), (sx, ey), (ex, ey)]
    return req.candidate(
        Strategy.TWO_SEGMENT_VERTICAL_FIRST, segments, vertical_first=True
    )


def _horizontal_z(req: RouteRequest, strategy: Strategy) -> RouteCandidate:
    sx, ex = _horizontal_ends(req)
    sy = req.source.center_y
    ey = req.target.center_y
    mid_x = (sx + ex) // 2
    segments = [(sx, sy), (mid_x, sy), (mid_x, ey), (ex, ey)]
    return req.candidate(strategy, segments, vertical_first=False)


def three_segment_horizontal_first(req: RouteRequest) -> RouteCandidate | None:
    if req.same_column or req.same_row:
        return None
    return _horizontal_z(req, Strategy.THREE_SEGMENT_HORIZONTAL_FIRST)


def non_overlapping_horizontal(req: RouteRequest) -> RouteCandidate | None:
    """Horizontal route, only when there is real space between the facing sides."""
    if req.same_column:
        return None
    sx, ex = _horizontal_ends(req)
    has_gap = sx < ex if req.going_right else sx > ex
    if not has_gap:
        return None
    return _horizontal_z(req, Strategy.NON_OVERLAPPING_HORIZONTAL)


def three_segment_vertical_first(req: RouteRequest) -> RouteCandidate | None:
    """Org-chart style route; only offered for the ``down`` flow hint."""
    if req.same_column or req.same_row or req.flow != FLOW_DOWN:
        return None
    sy, ey = _vertical_ends(req)
    sx = req.source.center_x
    ex = req.target.center_x
    mid_y = (sy + ey) // 2
    segments = [(sx, sy), (sx, mid_y), (ex, mid_y), (ex, ey)]
    return req.candidate(
        Strategy.THREE_SEGMENT_VERTICAL_FIRST, segments, vertical_first=True
    )


GENERATORS: list[Callable[[RouteRequest], RouteCandidate | None]] = [
    straight_vertical,
    two_segment_horizontal_first,
    two_segment_vertical_first,
    three_segment_horizontal_first,
    non_overlapping_horizontal,
    three_segment_vertical_first,
]


def generate_candidates(req: RouteRequest) -> list[RouteCandidate]:
    """Run every generator in order and collect the candidates they emit."""
    candidates = []
    for generator in GENERATORS:
        candidate = generator(req)
        if candidate is not None:
            candidates.append(candidate)
    return candidates
