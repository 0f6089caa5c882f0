"""Layout coordinator: grid placement, arrow routing and group bounds.

Boxes are never moved; the engine only converts author-specified grid
positions to pixels and asks the router for each arrow's path.
"""

from __future__ import annotations

import logging

from boxgrid.layout.colors import gradient_color
from boxgrid.layout.constants import (
    CHAR_WIDTH_PIXELS,
    GROUP_LABEL_SPACE,
    GROUP_PADDING,
    MAX_TEXT_LINES,
    MIN_CHARS_PER_LINE,
)
from boxgrid.layout.grid import (
    calculate_box_height,
    calculate_box_width,
    calculate_dimensions,
    calculate_touch_extension,
    estimate_legend_width,
    grid_to_pixel_x,
    grid_to_pixel_y,
)
from boxgrid.layout.model import (
    Arrow,
    Box,
    Diagram,
    DiagramConfig,
    Dimensions,
    Group,
    default_config,
)
from boxgrid.layout.routing import BoxData, RoutingError, route_arrow
from boxgrid.layout.text import wrap_text
from boxgrid.parser.model import BoxSpec, DiagramSpec, GroupDef, LegendEntry

logger = logging.getLogger(__name__)


def compute_layout(
    spec: DiagramSpec,
    config: DiagramConfig | None = None,
    legend: list[LegendEntry] | None = None,
    groups: list[GroupDef] | None = None,
    arrow_flow: str = "",
) -> tuple[Diagram, dict[str, BoxData]]:
    """Resolve *spec* to pixel geometry.

    Returns the diagram and the per-id box geometry used for routing.
    ``groups`` defaults to ``spec.groups``. Arrows that cannot be routed are
    logged and listed in ``Diagram.skipped_arrows``.
    """
    if config is None:
        config = default_config()
    if groups is None:
        groups = spec.groups

    max_grid_x = max((b.grid_x for b in spec.boxes), default=0)
    max_grid_y = max((b.grid_y for b in spec.boxes), default=0)

    dims = calculate_dimensions(max_grid_x, max_grid_y, config)
    dims.width += estimate_legend_width(legend)

    diagram = Diagram(width=dims.width, height=dims.height)
    box_data: dict[str, BoxData] = {}

    for spec_box in spec.boxes:
        _place_box(diagram, box_data, spec_box, dims, config, max_grid_y)

    _route_arrows(diagram, spec, box_data, arrow_flow)
    diagram.groups = resolve_groups(groups, box_data)

    logger.debug(
        "Layout %dx%d: %d boxes, %d arrows (%d skipped), %d groups",
        diagram.width,
        diagram.height,
        len(diagram.boxes),
        len(diagram.arrows),
        len(diagram.skipped_arrows),
        len(diagram.groups),
    )
    return diagram, box_data


def _place_box(
    diagram: Diagram,
    box_data: dict[str, BoxData],
    spec_box: BoxSpec,
    dims: Dimensions,
    config: DiagramConfig,
    max_grid_y: int,
) -> None:
    pixel_x = grid_to_pixel_x(spec_box.grid_x, dims, config)
    pixel_y = grid_to_pixel_y(spec_box.grid_y, dims, config)
    width = calculate_box_width(spec_box.grid_width, dims, config)
    height = calculate_box_height(spec_box.grid_height, config)

    if spec_box.touch_left:
        extension = calculate_touch_extension(config)
        width += extension
        pixel_x -= extension
        if diagram.boxes:
            _extend_right(diagram.boxes[-1], box_data, extension)

    color = spec_box.color or gradient_color(
        spec_box.grid_y, max_grid_y, config.default_color
    )

    max_chars = max(MIN_CHARS_PER_LINE, int(width / CHAR_WIDTH_PIXELS))
    lines = wrap_text(spec_box.label, max_chars, MAX_TEXT_LINES)

    diagram.boxes.append(
        Box(
            x=pixel_x,
            y=pixel_y,
            width=width,
            height=height,
            text="\n".join(lines),
            color=color,
            border_color=spec_box.border_color,
            border_width=spec_box.border_width,
            font_size=spec_box.font_size,
            text_color=spec_box.text_color,
            id=spec_box.id,
        )
    )
    box_data[spec_box.id] = BoxData(
        id=spec_box.id,
        grid_x=spec_box.grid_x,
        grid_y=spec_box.grid_y,
        pixel_x=pixel_x,
        pixel_y=pixel_y,
        width=width,
        height=height,
    )


def _extend_right(box: Box, box_data: dict[str, BoxData], extension: int) -> None:
    """Widen the previously placed box so it meets its touch-left neighbour."""
    box.width += extension
    data = box_data.get(box.id)
    if data is not None:
        data.width += extension
        data.recenter()


def _route_arrows(
    diagram: Diagram,
    spec: DiagramSpec,
    box_data: dict[str, BoxData],
    arrow_flow: str,
) -> None:
    all_boxes = list(box_data.values())

    for arrow_spec in spec.arrows:
        source = box_data[arrow_spec.from_id]
        target = box_data[arrow_spec.to_id]
        flow = arrow_spec.flow or arrow_flow

        try:
            plan = route_arrow(
                source.coords,
                target.coords,
                (source.grid_x, source.grid_y),
                (target.grid_x, target.grid_y),
                all_boxes,
                arrow_spec.from_id,
                arrow_spec.to_id,
                flow,
            )
        except RoutingError as e:
            logger.warning(
                "Skipping arrow %s -> %s: %s", arrow_spec.from_id, arrow_spec.to_id, e
            )
            diagram.skipped_arrows.append((arrow_spec.from_id, arrow_spec.to_id, str(e)))
            continue

        diagram.arrows.append(
            Arrow(
                from_x=plan.start_x,
                from_y=plan.start_y,
                to_x=plan.end_x,
                to_y=plan.end_y,
                vertical_first=plan.vertical_first,
                num_segments=plan.num_segments,
                from_box_id=arrow_spec.from_id,
                to_box_id=arrow_spec.to_id,
                strategy=plan.strategy,
                candidates=plan.candidates,
                selected_index=plan.selected_index,
            )
        )


def resolve_groups(
    groups: list[GroupDef], box_data: dict[str, BoxData]
) -> list[Group]:
    """Bounding rectangles for groups, padded and with room for the label.

    Member ids without geometry are ignored; groups left with no members
    are dropped.
    """
    resolved: list[Group] = []
    for group in groups:
        members = [box_data[bid] for bid in group.box_ids if bid in box_data]
        if not members:
            continue

        min_x = min(b.pixel_x for b in members)
        min_y = min(b.pixel_y for b in members)
        max_x = max(b.pixel_x + b.width for b in members)
        max_y = max(b.pixel_y + b.height for b in members)

        resolved.append(
            Group(
                x=min_x - GROUP_PADDING,
                y=min_y - GROUP_PADDING - GROUP_LABEL_SPACE,
                width=(max_x - min_x) + 2 * GROUP_PADDING,
                height=(max_y - min_y) + 2 * GROUP_PADDING + GROUP_LABEL_SPACE,
                label=group.label,
                box_ids=list(group.box_ids),
            )
        )
    return resolved
