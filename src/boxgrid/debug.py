"""Diagnostic JSON export of a laid-out diagram.

The output records final geometry for every box, arrow and group, plus every
routing candidate considered for each arrow, so routing decisions can be
inspected without reading the SVG.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from boxgrid.layout.model import Arrow, Diagram
from boxgrid.layout.routing import BoxData, RouteCandidate, Strategy

ONE_BEND_STRATEGIES = frozenset({
    Strategy.TWO_SEGMENT_VERTICAL_FIRST,
    Strategy.TWO_SEGMENT_HORIZONTAL_FIRST,
})


def classify_arrow_type(arrow: Arrow) -> str:
    """One of straight_vertical, straight_horizontal, one_bent, two_bent."""
    if arrow.from_x == arrow.to_x:
        return "straight_vertical"
    if arrow.from_y == arrow.to_y:
        return "straight_horizontal"
    if arrow.strategy in ONE_BEND_STRATEGIES:
        return "one_bent"
    return "two_bent"


def _last_segment(arrow: Arrow) -> tuple[tuple[int, int], tuple[int, int]]:
    if 0 <= arrow.selected_index < len(arrow.candidates):
        segments = arrow.candidates[arrow.selected_index].segments
        if len(segments) >= 2:
            return segments[-2], segments[-1]
    end = (arrow.to_x, arrow.to_y)
    if arrow.from_x == arrow.to_x or arrow.from_y == arrow.to_y:
        return (arrow.from_x, arrow.from_y), end
    # Bent shapes: vertical-first with two bends, or horizontal-first with
    # one, finish on a vertical segment
    if arrow.vertical_first == (arrow.num_segments == 3):
        return (arrow.to_x, arrow.from_y), end
    return (arrow.from_x, arrow.to_y), end


def arrowhead_orientation(arrow: Arrow) -> str:
    """Direction of the final segment: up, down, left or right."""
    (x1, y1), (x2, y2) = _last_segment(arrow)
    if x1 == x2:
        return "down" if y2 > y1 else "up"
    return "right" if x2 > x1 else "left"


def _candidate_entry(candidate: RouteCandidate, selected: bool) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "strategy": candidate.strategy.value,
        "score": candidate.score,
        "startX": candidate.start_x,
        "startY": candidate.start_y,
        "endX": candidate.end_x,
        "endY": candidate.end_y,
        "verticalFirst": candidate.vertical_first,
        "selected": selected,
    }
    if candidate.rejected:
        entry["rejected"] = True
        entry["rejectReason"] = candidate.reject_reason
    return entry


def _arrow_entry(arrow: Arrow) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "fromBox": arrow.from_box_id,
        "toBox": arrow.to_box_id,
        "startX": arrow.from_x,
        "startY": arrow.from_y,
        "endX": arrow.to_x,
        "endY": arrow.to_y,
        "routingStrategy": arrow.strategy.value,
        "arrowType": classify_arrow_type(arrow),
        "arrowheadOrientation": arrowhead_orientation(arrow),
        "verticalFirst": arrow.vertical_first,
    }
    if arrow.candidates:
        entry["candidates"] = [
            _candidate_entry(c, i == arrow.selected_index)
            for i, c in enumerate(arrow.candidates)
        ]
    return entry


def generate_debug_output(
    diagram: Diagram, box_data: dict[str, BoxData] | None = None
) -> dict[str, Any]:
    """Build a JSON-serializable description of *diagram*.

    Grid coordinates come from *box_data*; boxes without an entry there
    report grid position 0, 0.
    """
    box_data = box_data or {}

    boxes = []
    for box in diagram.boxes:
        data = box_data.get(box.id)
        boxes.append({
            "id": box.id,
            "x": box.x,
            "y": box.y,
            "width": box.width,
            "height": box.height,
            "gridX": data.grid_x if data else 0,
            "gridY": data.grid_y if data else 0,
            "label": box.text,
            "color": box.color,
        })

    output: dict[str, Any] = {
        "diagram": {"width": diagram.width, "height": diagram.height},
        "boxes": boxes,
        "arrows": [_arrow_entry(a) for a in diagram.arrows],
    }
    if diagram.groups:
        output["groups"] = [
            {
                "label": g.label,
                "x": g.x,
                "y": g.y,
                "width": g.width,
                "height": g.height,
                "boxIds": list(g.box_ids),
            }
            for g in diagram.groups
        ]
    if diagram.skipped_arrows:
        output["skippedArrows"] = [
            {"fromBox": src, "toBox": dst, "reason": reason}
            for src, dst, reason in diagram.skipped_arrows
        ]
    return output


def write_debug_json(path: str | Path, output: dict[str, Any]) -> None:
    Path(path).write_text(json.dumps(output, indent=2))
