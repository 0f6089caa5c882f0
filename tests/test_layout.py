"""Tests for grid placement, canvas sizing and groups."""

import pytest

from boxgrid.layout import (
    DiagramConfig,
    calculate_dimensions,
    compute_layout,
    estimate_legend_width,
)
from boxgrid.layout.grid import grid_to_pixel_x, grid_to_pixel_y
from boxgrid.parser import LegendEntry, parse_diagram_spec


def _layout(text, **kwargs):
    return compute_layout(parse_diagram_spec(text), **kwargs)


def test_dimensions_single_cell():
    dims = calculate_dimensions(1, 1, DiagramConfig())
    assert (dims.width, dims.height) == (360, 280)
    assert dims.left_margin == 90
    assert dims.top_margin == 50
    assert dims.bottom_margin == 80
    assert dims.box_width == 250
    assert dims.box_height == 100


def test_dimensions_three_by_two():
    dims = calculate_dimensions(3, 2, DiagramConfig())
    assert (dims.width, dims.height) == (660, 430)


def test_stretch_scales_width_only():
    dims = calculate_dimensions(3, 2, DiagramConfig(stretch=0.8))
    assert dims.width < 660
    assert dims.height == 430


def test_legend_width():
    assert estimate_legend_width(None) == 0
    assert estimate_legend_width([]) == 0
    legend = [LegendEntry("p", "In Progress"), LegendEntry("g", "Done")]
    assert estimate_legend_width(legend) == 11 * 8 + 30 + 12 + 20


def test_legend_extends_canvas():
    diagram, _ = _layout("a: 1,1: A\n", legend=[LegendEntry("p", "Work")])
    assert diagram.width == 360 + 4 * 8 + 62


def test_box_pixel_geometry():
    diagram, box_data = _layout("a: 1,1: A\nb: 3,2,1,2: B\n")
    a, b = diagram.boxes
    assert (a.x, a.y, a.width, a.height) == (90, 50, 250, 100)
    assert (b.x, b.y) == (390, 200)
    assert b.width == 100
    assert b.height == 200
    assert box_data["b"].center_x == 440
    assert box_data["b"].center_y == 300


def test_default_colors_follow_row_gradient():
    diagram, _ = _layout("a: 1,1: A\nb: 1,3: B\nc: 3,3: C, g\n")
    assert diagram.boxes[0].color == "#FFE691"
    assert diagram.boxes[1].color == "#FFCE33"
    assert diagram.boxes[2].color == "#D3D3D3"


def test_configured_default_color_drives_gradient():
    config = DiagramConfig(default_color="#3366FF")
    diagram, _ = _layout("a: 1,1: Top\nb: 1,2: Bottom\n", config=config)
    assert diagram.boxes[0].color == "#99B2F7"
    assert diagram.boxes[1].color == "#3366FF"


@pytest.mark.parametrize(
    "config",
    [
        DiagramConfig(),
        DiagramConfig(stretch=0.5),
        DiagramConfig(stretch=2.0, vertical_gap_units=1.0),
        DiagramConfig(grid_unit=37, gap_units=0.25),
    ],
)
def test_grid_to_pixel_is_strictly_increasing(config):
    dims = calculate_dimensions(8, 8, config)
    xs = [grid_to_pixel_x(g, dims, config) for g in range(1, 9)]
    ys = [grid_to_pixel_y(g, dims, config) for g in range(1, 9)]
    assert all(a < b for a, b in zip(xs, xs[1:]))
    assert all(a < b for a, b in zip(ys, ys[1:]))
    assert xs == [grid_to_pixel_x(g, dims, config) for g in range(1, 9)]
    assert ys == [grid_to_pixel_y(g, dims, config) for g in range(1, 9)]


def test_box_styles_carried_over():
    diagram, _ = _layout("a: 1,1: A, rb-rt-2t\n")
    box = diagram.boxes[0]
    assert box.border_color == "#FF0000"
    assert box.border_width == 3
    assert box.text_color == "#FF0000"
    assert box.font_size == 48


def test_labels_are_wrapped():
    diagram, _ = _layout("a: 1,1: Business Initiatives and Planning\n")
    # 250 px / 16 px per char -> 15 chars per line
    assert diagram.boxes[0].text_lines == ["Business", "Initiatives and", "Planning"]


def test_touch_left_boxes_meet():
    diagram, box_data = _layout("a: 1,1: A\nb: |+2,0: B\n")
    a, b = diagram.boxes
    assert a.width == 275
    assert b.width == 275
    assert b.x == 365
    assert a.x + a.width == b.x
    assert box_data["a"].width == 275
    assert box_data["a"].center_x == 90 + 275 // 2


def test_group_bounds():
    diagram, _ = _layout("a: 1,1: A @T\nb: 3,1: B @T\n@T: Team\n")
    assert len(diagram.groups) == 1
    group = diagram.groups[0]
    assert group.label == "Team"
    assert group.box_ids == ["a", "b"]
    assert (group.x, group.y) == (90 - 15, 50 - 15 - 20)
    assert group.width == (640 - 90) + 30
    assert group.height == 100 + 30 + 20


def test_groups_override_and_empty_group_dropped():
    from boxgrid.parser import GroupDef

    spec = parse_diagram_spec("a: 1,1: A\n")
    diagram, _ = compute_layout(
        spec,
        groups=[GroupDef("x", "X", []), GroupDef("y", "Y", ["missing"]),
                GroupDef("z", "Z", ["a", "missing"])],
    )
    assert [g.label for g in diagram.groups] == ["Z"]


def test_every_arrow_routed_or_skipped():
    diagram, _ = _layout(
        "a: 1,1: A\nb: 3,1: B\nc: 5,1: C\n---\na -> b\na -> c\n"
    )
    assert len(diagram.arrows) == 1
    assert diagram.skipped_arrows[0][:2] == ("a", "c")
    assert "no valid arrow routing found from a to c" in diagram.skipped_arrows[0][2]


def test_skipped_arrow_is_logged(caplog):
    with caplog.at_level("WARNING", logger="boxgrid.layout.engine"):
        _layout("a: 1,1: A\nb: 3,1: B\nc: 5,1: C\n---\na -> c\n")
    assert "Skipping arrow a -> c" in caplog.text
