"""SVG generation for box diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from boxgrid.layout.model import Arrow, Box, Diagram, Group
from boxgrid.render.constants import (
    ARROWHEAD_ID,
    ARROWHEAD_POINTS,
    ARROWHEAD_REF_X,
    ARROWHEAD_REF_Y,
    AXIS_MARGIN,
    AXIS_RIGHT_INSET,
    AXIS_X,
    BASE_FONT_SIZE,
    BASE_LINE_HEIGHT,
    GROUP_CORNER_RADIUS,
    GROUP_DASH,
    GROUP_LABEL_OFFSET_X,
    GROUP_LABEL_OFFSET_Y,
    X_AXIS_LABEL_INSET_X,
    X_AXIS_LABEL_INSET_Y,
    Y_AXIS_LABEL_POS,
)
from boxgrid.render.fonts import FontData, font_face_css, font_family
from boxgrid.render.legend import render_legend
from boxgrid.render.style import DEFAULT_THEME, Theme


def render_svg(
    diagram: Diagram,
    theme: Theme = DEFAULT_THEME,
    font: FontData | None = None,
) -> str:
    """Render a laid-out diagram to an SVG string.

    Draw order: background, axes, groups, arrows, boxes, legend.
    """
    d = draw.Drawing(diagram.width, diagram.height)
    if font is not None:
        d.append_css(font_face_css(font))

    arrowhead = _arrowhead_marker(theme)

    d.append(draw.Rectangle(
        0, 0, diagram.width, diagram.height, fill=theme.background_color,
    ))

    _render_axes(d, diagram, theme, arrowhead, font)

    for group in diagram.groups:
        _render_group(d, group, theme, font)

    for arrow in diagram.arrows:
        d.append(_arrow_element(arrow, theme, arrowhead))

    for box in diagram.boxes:
        _render_box(d, box, theme, font)

    render_legend(d, diagram, theme, font)

    return d.as_svg()


def _arrowhead_marker(theme: Theme) -> draw.Marker:
    marker = draw.Marker(
        -1, -1, 13, 12,
        orient="auto",
        id=ARROWHEAD_ID,
        refX=ARROWHEAD_REF_X,
        refY=ARROWHEAD_REF_Y,
    )
    marker.append(draw.Lines(
        *ARROWHEAD_POINTS,
        close=False,
        fill="none",
        stroke=theme.stroke_color,
        stroke_width=theme.arrowhead_stroke_width,
        stroke_linejoin="miter",
    ))
    return marker


def _render_axes(
    d: draw.Drawing,
    diagram: Diagram,
    theme: Theme,
    arrowhead: draw.Marker,
    font: FontData | None,
) -> None:
    bottom = diagram.height - AXIS_MARGIN

    if diagram.y_label:
        d.append(draw.Line(
            AXIS_X, bottom, AXIS_X, AXIS_MARGIN,
            stroke=theme.stroke_color,
            stroke_width=theme.arrow_stroke_width,
            marker_end=arrowhead,
        ))
        d.append(draw.Text(
            diagram.y_label,
            theme.axis_font_size,
            Y_AXIS_LABEL_POS, Y_AXIS_LABEL_POS,
            font_family=font_family(font),
            text_anchor="end",
            transform=f"rotate(-90 {Y_AXIS_LABEL_POS} {Y_AXIS_LABEL_POS})",
        ))

    if diagram.x_label:
        d.append(draw.Line(
            AXIS_X, bottom, diagram.width - AXIS_RIGHT_INSET, bottom,
            stroke=theme.stroke_color,
            stroke_width=theme.arrow_stroke_width,
            marker_end=arrowhead,
        ))
        d.append(draw.Text(
            diagram.x_label,
            theme.axis_font_size,
            diagram.width - X_AXIS_LABEL_INSET_X,
            diagram.height - X_AXIS_LABEL_INSET_Y,
            font_family=font_family(font),
            text_anchor="end",
        ))


def _render_group(
    d: draw.Drawing, group: Group, theme: Theme, font: FontData | None
) -> None:
    d.append(draw.Rectangle(
        group.x, group.y, group.width, group.height,
        rx=GROUP_CORNER_RADIUS,
        fill="none",
        stroke=theme.stroke_color,
        stroke_width=theme.group_stroke_width,
        stroke_dasharray=GROUP_DASH,
    ))
    if group.label:
        d.append(draw.Text(
            group.label,
            theme.group_font_size,
            group.x + GROUP_LABEL_OFFSET_X,
            group.y + GROUP_LABEL_OFFSET_Y,
            font_family=font_family(font),
        ))


def arrow_points(arrow: Arrow) -> list[tuple[int, int]]:
    """Polyline of an arrow, reconstructed from its end points and shape.

    Straight when the ends share an axis; two bends around the midpoint for
    three-segment routes; otherwise a single bend.
    """
    fx, fy, tx, ty = arrow.from_x, arrow.from_y, arrow.to_x, arrow.to_y
    if fx == tx or fy == ty:
        return [(fx, fy), (tx, ty)]
    if arrow.num_segments == 3:
        if arrow.vertical_first:
            mid_y = (fy + ty) // 2
            return [(fx, fy), (fx, mid_y), (tx, mid_y), (tx, ty)]
        mid_x = (fx + tx) // 2
        return [(fx, fy), (mid_x, fy), (mid_x, ty), (tx, ty)]
    if arrow.vertical_first:
        return [(fx, fy), (fx, ty), (tx, ty)]
    return [(fx, fy), (tx, fy), (tx, ty)]


def _arrow_element(
    arrow: Arrow, theme: Theme, arrowhead: draw.Marker
) -> draw.DrawingElement:
    points = arrow_points(arrow)
    style = dict(
        stroke=theme.stroke_color,
        stroke_width=theme.arrow_stroke_width,
        marker_end=arrowhead,
    )
    if len(points) == 2:
        (x1, y1), (x2, y2) = points
        return draw.Line(x1, y1, x2, y2, **style)
    flat = [coord for point in points for coord in point]
    return draw.Lines(*flat, close=False, fill="none", **style)


def _render_box(
    d: draw.Drawing, box: Box, theme: Theme, font: FontData | None
) -> None:
    d.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        fill=box.color or theme.default_box_color,
        stroke=box.border_color or theme.stroke_color,
        stroke_width=box.border_width or theme.box_stroke_width,
    ))

    font_size = box.font_size or theme.box_font_size
    line_height = font_size * BASE_LINE_HEIGHT // BASE_FONT_SIZE
    lines = box.text_lines
    start_y = box.y + box.height // 2 - (len(lines) - 1) * line_height // 2

    text_style = dict(
        font_family=font_family(font),
        font_weight=theme.box_font_weight,
        text_anchor="middle",
        dominant_baseline="middle",
    )
    if box.text_color:
        text_style["fill"] = box.text_color

    for i, line in enumerate(lines):
        if not line:
            continue
        d.append(draw.Text(
            line,
            font_size,
            box.x + box.width // 2,
            start_y + i * line_height,
            **text_style,
        ))
