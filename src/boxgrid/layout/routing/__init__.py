"""Arrow routing subpackage.

Public API:
- route_arrow: pick the best collision-free orthogonal route for one arrow
- RoutingPlan / RouteCandidate: the chosen route and every candidate considered
- BoxData / BoxCoords: box geometry consumed by the router
- score_route: candidate scoring heuristic
"""

from boxgrid.layout.routing.candidates import RouteRequest, generate_candidates
from boxgrid.layout.routing.common import (
    COLLISION_DETECTED,
    BoxCoords,
    BoxData,
    RouteCandidate,
    RoutingError,
    RoutingPlan,
    Strategy,
    check_path_collision,
    check_segment_collision,
)
from boxgrid.layout.routing.core import route_arrow
from boxgrid.layout.routing.scoring import is_narrow_to_wide, score_route

__all__ = [
    "COLLISION_DETECTED",
    "BoxCoords",
    "BoxData",
    "RouteCandidate",
    "RouteRequest",
    "RoutingError",
    "RoutingPlan",
    "Strategy",
    "check_path_collision",
    "check_segment_collision",
    "generate_candidates",
    "is_narrow_to_wide",
    "route_arrow",
    "score_route",
]
