"""Tests for arrow routing."""

import pytest

from boxgrid.layout import compute_layout
from boxgrid.layout.routing import (
    COLLISION_DETECTED,
    BoxCoords,
    BoxData,
    RouteCandidate,
    RoutingError,
    Strategy,
    check_segment_collision,
    is_narrow_to_wide,
    route_arrow,
    score_route,
)
from boxgrid.parser import parse_diagram_spec


def _layout(text, **kwargs):
    return compute_layout(parse_diagram_spec(text), **kwargs)


def test_same_column_routes_straight():
    """Boxes at (1,1) and (1,3) get a straight vertical arrow."""
    diagram, _ = _layout("a: 1,1: A\nb: 1,3: B\n---\na -> b\n")
    arrow = diagram.arrows[0]
    assert arrow.strategy is Strategy.STRAIGHT_VERTICAL
    assert (arrow.from_x, arrow.from_y) == (215, 150)
    assert (arrow.to_x, arrow.to_y) == (215, 348)
    assert arrow.num_segments == 1


def test_upward_arrow_enters_from_below():
    diagram, _ = _layout("a: 1,1: A\nb: 1,3: B\n---\nb -> a\n")
    arrow = diagram.arrows[0]
    assert arrow.strategy is Strategy.STRAIGHT_VERTICAL
    assert (arrow.from_y, arrow.to_y) == (350, 152)


def test_narrow_to_wide_prefers_horizontal_exit():
    plan = route_arrow(
        BoxCoords(930, 650, 950, 750),
        BoxCoords(930, 800, 1155, 900),
        (8, 5),
        (8, 6),
        [],
        "narrow",
        "wide",
    )
    assert plan.strategy is Strategy.TWO_SEGMENT_HORIZONTAL_FIRST
    assert plan.start_x == 950
    assert plan.end_y == 798
    assert plan.num_segments == 2
    assert not plan.vertical_first


def test_same_row_uses_non_overlapping_horizontal():
    plan = route_arrow(
        BoxCoords(100, 100, 200, 200),
        BoxCoords(300, 100, 400, 200),
        (1, 2),
        (3, 2),
        [],
        "a",
        "b",
    )
    assert plan.strategy is Strategy.NON_OVERLAPPING_HORIZONTAL
    assert plan.start_x == 200
    assert plan.end_x == 298
    assert len(plan.candidates) == 1


def test_backward_arrow():
    plan = route_arrow(
        BoxCoords(300, 100, 400, 200),
        BoxCoords(100, 100, 200, 200),
        (3, 2),
        (1, 2),
        [],
        "b",
        "a",
    )
    assert plan.start_x == 300
    assert plan.end_x == 202


def test_same_position_has_no_route():
    box = BoxCoords(100, 100, 200, 200)
    with pytest.raises(RoutingError, match="from a to b"):
        route_arrow(box, box, (1, 1), (1, 1), [], "a", "b")


def test_colliding_candidates_rejected_but_kept():
    diagram, _ = _layout("a: 1,1: A\nb: 3,1: B\nc: 5,2: C\n---\na -> c\n")
    arrow = diagram.arrows[0]
    assert arrow.strategy is Strategy.TWO_SEGMENT_VERTICAL_FIRST
    assert [c.strategy for c in arrow.candidates] == [
        Strategy.TWO_SEGMENT_VERTICAL_FIRST,
        Strategy.THREE_SEGMENT_HORIZONTAL_FIRST,
        Strategy.NON_OVERLAPPING_HORIZONTAL,
    ]
    assert arrow.selected_index == 0
    rejected = arrow.candidates[1:]
    assert all(c.rejected for c in rejected)
    assert all(c.reject_reason == COLLISION_DETECTED for c in rejected)
    assert all(c.score == 0 for c in rejected)
    # 80 base minus the capped distance penalty
    assert arrow.candidates[0].score == 30


def test_selected_route_avoids_other_boxes():
    diagram, box_data = _layout(
        "a: 1,1: A\nb: 3,1: B\nc: 5,2: C\n---\na -> c\n"
    )
    chosen = diagram.arrows[0].candidates[diagram.arrows[0].selected_index]
    others = [d for bid, d in box_data.items() if bid not in ("a", "c")]
    for (x1, y1), (x2, y2) in zip(chosen.segments, chosen.segments[1:]):
        assert not check_segment_collision(x1, y1, x2, y2, others)


def test_flow_down_prefers_vertical_routes():
    text = "a: 1,1: A\nc: 3,2: C\n---\na -> c\n"
    plain, _ = _layout(text)
    assert plain.arrows[0].strategy is Strategy.NON_OVERLAPPING_HORIZONTAL

    down, _ = _layout(text, arrow_flow="down")
    assert down.arrows[0].strategy is Strategy.THREE_SEGMENT_VERTICAL_FIRST
    assert down.arrows[0].vertical_first
    assert down.arrows[0].num_segments == 3


def test_per_arrow_flow_overrides_diagram_flow():
    diagram, _ = _layout("a: 1,1: A\nc: 3,2: C\n---\na -> c | down\n")
    assert diagram.arrows[0].strategy is Strategy.THREE_SEGMENT_VERTICAL_FIRST


def test_best_score_wins():
    diagram, _ = _layout("a: 1,1: A\nc: 3,2: C\n---\na -> c\n")
    arrow = diagram.arrows[0]
    scores = [c.score for c in arrow.candidates if not c.rejected]
    assert arrow.candidates[arrow.selected_index].score == max(scores)


def test_segment_collision_buffer():
    box = BoxData("o", 1, 1, 100, 100, 50, 50)
    assert check_segment_collision(97, 0, 97, 300, [box])
    assert not check_segment_collision(96, 0, 96, 300, [box])
    assert not check_segment_collision(120, 0, 120, 300, [box], {"o"})


def test_box_data_centers():
    box = BoxData("o", 1, 1, 100, 100, 51, 31)
    assert (box.center_x, box.center_y) == (125, 115)
    assert box.coords == BoxCoords(100, 100, 151, 131)


def test_narrow_to_wide_threshold():
    assert is_narrow_to_wide(20, 225)
    assert not is_narrow_to_wide(100, 300)
    assert not is_narrow_to_wide(0, 300)


def _candidate(strategy, length, flow=""):
    return RouteCandidate(
        strategy=strategy,
        start_x=0,
        start_y=0,
        end_x=length,
        end_y=0,
        vertical_first=False,
        segments=[(0, 0), (length, 0)],
        box_width1=250,
        box_width2=250,
        flow=flow,
    )


def test_score_distance_penalty():
    assert score_route(_candidate(Strategy.NON_OVERLAPPING_HORIZONTAL, 48)) == 86
    assert score_route(_candidate(Strategy.NON_OVERLAPPING_HORIZONTAL, 500)) == 40
    assert score_route(_candidate(Strategy.NON_OVERLAPPING_HORIZONTAL, 501)) == 40
    assert score_route(_candidate(Strategy.NON_OVERLAPPING_HORIZONTAL, 2000)) == 40


def test_score_flow_bonus():
    assert score_route(_candidate(Strategy.STRAIGHT_VERTICAL, 0, "down")) == 130
    assert score_route(_candidate(Strategy.THREE_SEGMENT_VERTICAL_FIRST, 0, "down")) == 110
    assert score_route(_candidate(Strategy.TWO_SEGMENT_VERTICAL_FIRST, 0, "down")) == 95
    assert score_route(_candidate(Strategy.NON_OVERLAPPING_HORIZONTAL, 0, "down")) == 90
