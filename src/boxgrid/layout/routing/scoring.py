"""Route quality scoring (higher is better)."""

from __future__ import annotations

from boxgrid.layout.constants import (
    DISTANCE_PENALTY_THRESHOLD,
    FLOW_DOWN,
    MAX_DISTANCE_PENALTY,
)
from boxgrid.layout.routing.common import RouteCandidate, Strategy

BASE_SCORES: dict[Strategy, int] = {
    Strategy.STRAIGHT_VERTICAL: 100,
    Strategy.NON_OVERLAPPING_HORIZONTAL: 90,
    Strategy.TWO_SEGMENT_VERTICAL_FIRST: 80,
    Strategy.TWO_SEGMENT_HORIZONTAL_FIRST: 75,
    Strategy.THREE_SEGMENT_HORIZONTAL_FIRST: 70,
    Strategy.THREE_SEGMENT_VERTICAL_FIRST: 70,
}

NARROW_TO_WIDE_STRAIGHT_PENALTY = 50
NARROW_TO_WIDE_HORIZONTAL_FIRST_SCORE = 95

FLOW_DOWN_BONUS: dict[Strategy, int] = {
    Strategy.STRAIGHT_VERTICAL: 30,
    Strategy.THREE_SEGMENT_VERTICAL_FIRST: 40,
    Strategy.TWO_SEGMENT_VERTICAL_FIRST: 15,
}


def is_narrow_to_wide(source_width: int, target_width: int) -> bool:
    """True when the width difference exceeds twice the source width.

    A thin box feeding a much wider one looks better with an arrow that
    leaves the thin box sideways.
    """
    return source_width > 0 and abs(target_width - source_width) > source_width * 2


def distance_penalty(candidate: RouteCandidate) -> int:
    distance = abs(candidate.end_x - candidate.start_x) + abs(
        candidate.end_y - candidate.start_y
    )
    if distance > DISTANCE_PENALTY_THRESHOLD:
        return MAX_DISTANCE_PENALTY
    return distance // 10


def score_route(candidate: RouteCandidate) -> int:
    """Score a candidate by strategy, length and flow hint."""
    narrow_to_wide = is_narrow_to_wide(candidate.box_width1, candidate.box_width2)

    score = BASE_SCORES[candidate.strategy]
    if narrow_to_wide:
        if candidate.strategy is Strategy.STRAIGHT_VERTICAL:
            score -= NARROW_TO_WIDE_STRAIGHT_PENALTY
        elif candidate.strategy is Strategy.TWO_SEGMENT_HORIZONTAL_FIRST:
            score = NARROW_TO_WIDE_HORIZONTAL_FIRST_SCORE

    score -= distance_penalty(candidate)

    if candidate.flow == FLOW_DOWN:
        score += FLOW_DOWN_BONUS.get(candidate.strategy, 0)

    return score
