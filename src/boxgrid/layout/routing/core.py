"""Arrow routing: generate candidates, filter collisions, pick the best score."""

from __future__ import annotations

import logging

from boxgrid.layout.routing.candidates import RouteRequest, generate_candidates
from boxgrid.layout.routing.common import (
    COLLISION_DETECTED,
    BoxCoords,
    BoxData,
    RouteCandidate,
    RoutingError,
    RoutingPlan,
    check_path_collision,
)
from boxgrid.layout.routing.scoring import score_route

logger = logging.getLogger(__name__)


def route_arrow(
    box1: BoxCoords,
    box2: BoxCoords,
    from_grid: tuple[int, int],
    to_grid: tuple[int, int],
    all_boxes: list[BoxData] | None,
    from_id: str,
    to_id: str,
    flow: str = "",
) -> RoutingPlan:
    """Route an arrow from *box1* to *box2*.

    Every candidate is kept in the returned plan for diagnostics, including
    the ones rejected for colliding with a box other than the two endpoints.
    Raises RoutingError if no candidate survives.
    """
    request = RouteRequest(
        source=box1,
        target=box2,
        from_grid_x=from_grid[0],
        from_grid_y=from_grid[1],
        to_grid_x=to_grid[0],
        to_grid_y=to_grid[1],
        flow=flow,
    )
    candidates = generate_candidates(request)

    best_index = -1
    best_score = 0
    for i, candidate in enumerate(candidates):
        if check_path_collision(candidate.segments, all_boxes or [], from_id, to_id):
            candidate.rejected = True
            candidate.reject_reason = COLLISION_DETECTED
            continue
        candidate.score = score_route(candidate)
        # Strictly greater: ties keep the earlier candidate
        if best_index < 0 or candidate.score > best_score:
            best_index = i
            best_score = candidate.score

    if best_index < 0:
        raise RoutingError(
            f"no valid arrow routing found from {from_id} to {to_id} "
            "(all strategies failed or produced illegal arrows)"
        )

    best = candidates[best_index]
    logger.debug(
        "Routed %s -> %s with %s (score %d, %d candidates)",
        from_id,
        to_id,
        best.strategy.value,
        best.score,
        len(candidates),
    )
    return _plan_from(best, candidates, best_index)


def _plan_from(
    best: RouteCandidate, candidates: list[RouteCandidate], index: int
) -> RoutingPlan:
    return RoutingPlan(
        start_x=best.start_x,
        start_y=best.start_y,
        end_x=best.end_x,
        end_y=best.end_y,
        strategy=best.strategy,
        vertical_first=best.vertical_first,
        num_segments=best.num_segments,
        candidates=candidates,
        selected_index=index,
    )
