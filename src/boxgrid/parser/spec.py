"""Parser for the box diagram text format.

Works line by line. Each line is one of:

- a comment (``#``) or blank line, ignored everywhere
- a container header ``id: x,y [`` or footer ``]``
- the section separator ``---``
- an arrow ``from -> to`` with an optional ``| flow`` hint
- a group label ``@Name: Label``
- a box ``[id:] x,y[,w[,h]]: Label[, styles][ @Group]``

Parsing is all-or-nothing: the first problem raises ParseError and no
partial DiagramSpec is returned.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from boxgrid.parser.model import (
    INTERNAL_ID_PREFIX,
    ArrowSpec,
    BoxSpec,
    DiagramSpec,
    GroupDef,
    ParsedCoordinate,
)
from boxgrid.parser.styles import parse_box_styles

_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_SEPARATOR = "---"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

MIN_GRID_WIDTH = 0.2
MAX_GRID_WIDTH = 1000.0
MIN_GRID_HEIGHT = 1
DEFAULT_GRID_WIDTH = 2.0
DEFAULT_GRID_HEIGHT = 1


class ParseError(ValueError):
    """Raised when diagram text is malformed."""


@dataclass
class _Container:
    id: str
    base_x: int
    base_y: int


@dataclass
class _ParserState:
    """Mutable state threaded through the line handlers."""

    custom_colors: dict[str, str]
    spec: DiagramSpec = field(default_factory=DiagramSpec)
    in_arrow_section: bool = False
    container: _Container | None = None
    previous_box_id: str = ""
    previous_grid_x: int = 0
    previous_grid_y: int = 0
    next_internal_id: int = 0
    seen_ids: set[str] = field(default_factory=set)
    # group name -> display label, from "@Name: Label" lines
    group_labels: dict[str, str] = field(default_factory=dict)
    # (box_id, group name) in declaration order
    box_groups: list[tuple[str, str]] = field(default_factory=list)


def parse_coordinate(coord_str: str) -> ParsedCoordinate:
    """Parse one grid axis value.

    ``"5"`` is absolute, ``"+2"`` and ``"-1"`` are relative to the previous
    box, and ``"0"`` is shorthand for ``"+0"`` (grids start at 1, so an
    absolute 0 is never meaningful).
    """
    s = coord_str.strip()
    if s == "0":
        return ParsedCoordinate(is_relative=True, value=0)

    try:
        value = _parse_int(s)
    except ValueError as err:
        raise ParseError(f"invalid coordinate '{s}'") from err
    return ParsedCoordinate(is_relative=s[0] in "+-", value=value)


def _parse_int(s: str) -> int:
    """Plain ASCII decimal integer with an optional sign."""
    if not _INT_PATTERN.fullmatch(s):
        raise ValueError(f"not a decimal integer: '{s}'")
    return int(s)


def parse_number_or_fraction(s: str) -> float:
    """Parse an integer, decimal or ``numerator/denominator`` fraction.

    >>> parse_number_or_fraction("3/4")
    0.75
    """
    s = s.strip()
    if "/" not in s:
        try:
            return float(s)
        except ValueError as err:
            raise ParseError(f"invalid number '{s}'") from err

    parts = s.split("/")
    if len(parts) != 2:
        raise ParseError(f"invalid fraction '{s}': must be 'numerator/denominator'")
    try:
        numerator = float(parts[0].strip())
        denominator = float(parts[1].strip())
    except ValueError as err:
        raise ParseError(f"invalid fraction '{s}': {err}") from err
    if denominator == 0:
        raise ParseError(f"invalid fraction '{s}': division by zero")
    return numerator / denominator


def parse_diagram_spec(
    text: str, custom_colors: dict[str, str] | None = None
) -> DiagramSpec:
    """Parse diagram text (front matter already removed) into a DiagramSpec."""
    state = _ParserState(custom_colors=custom_colors or {})

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line == "]":
            _close_container(state)
            continue

        if line.endswith("["):
            _open_container(line, state)
            continue

        if line == _SEPARATOR:
            if state.container is not None:
                raise ParseError("section separator not allowed inside container")
            state.in_arrow_section = True
            continue

        # Arrows are recognised in both sections
        if "->" in line and _parse_arrow(line, state):
            continue

        if state.in_arrow_section:
            raise ParseError(f"invalid arrow definition: '{line}'")

        if line.startswith("@"):
            _parse_group_label(line, state)
            continue

        _parse_box(line, state)

    if state.container is not None:
        raise ParseError(f"unclosed container '{state.container.id}'")

    _validate_arrows(state.spec)
    state.spec.groups = _build_groups(state)
    return state.spec


def _close_container(state: _ParserState) -> None:
    if state.container is None:
        raise ParseError("unexpected ']' outside container")
    state.container = None


def _open_container(line: str, state: _ParserState) -> None:
    """Open a container: ``id: x,y [`` or ``id: x,y: Label [``.

    Containers only offset coordinates; they never appear in the output.
    """
    if state.container is not None:
        raise ParseError("nested containers not supported")
    if state.in_arrow_section:
        raise ParseError("container not allowed in arrow section")

    header = line[:-1].strip()
    header_parts = header.split(":", 2)
    if len(header_parts) < 2:
        raise ParseError(f"invalid container definition: '{line}'")

    container_id = header_parts[0].strip()
    coords = header_parts[1].strip().split(",")
    if len(coords) != 2:
        raise ParseError(f"invalid container coordinates: '{line}'")

    try:
        base_x = _parse_int(coords[0].strip())
    except ValueError as err:
        raise ParseError(f"invalid container X coordinate in line: '{line}'") from err
    try:
        base_y = _parse_int(coords[1].strip())
    except ValueError as err:
        raise ParseError(f"invalid container Y coordinate in line: '{line}'") from err

    state.container = _Container(id=container_id, base_x=base_x, base_y=base_y)
    state.previous_grid_x = base_x
    state.previous_grid_y = base_y


def _parse_arrow(line: str, state: _ParserState) -> bool:
    """Parse ``from -> to[| flow]``. Returns False if the line is not an arrow."""
    parts = line.split("->")
    if len(parts) != 2:
        return False

    source = parts[0].strip()
    target, _, flow = parts[1].partition("|")
    target = target.strip()
    flow = flow.strip()
    if not source or not target:
        return False

    for endpoint in (source, target):
        if endpoint.startswith(INTERNAL_ID_PREFIX):
            raise ParseError(
                f"arrow '{source} -> {target}' references box without explicit "
                f"label (internal ID: {endpoint})"
            )

    state.spec.arrows.append(ArrowSpec(from_id=source, to_id=target, flow=flow))
    return True


def _parse_group_label(line: str, state: _ParserState) -> None:
    name, sep, label = line[1:].partition(":")
    name = name.strip()
    state.group_labels[name] = label.strip() if sep else name


def _resolve_axis(coord: ParsedCoordinate, previous: int, base: int) -> int:
    if coord.is_relative:
        return previous + coord.value
    return base + coord.value


def _parse_box(line: str, state: _ParserState) -> None:
    parts = line.split(":", 2)
    if len(parts) == 3:
        box_id = parts[0].strip()
        if not box_id:
            raise ParseError(f"invalid box definition: empty ID in line '{line}'")
        if not _ID_PATTERN.fullmatch(box_id):
            raise ParseError(
                f"invalid ID '{box_id}': must contain only alphanumeric "
                "characters, underscore, or hyphen"
            )
        coords_str, label_and_style = parts[1], parts[2]
    elif len(parts) == 2:
        box_id = f"{INTERNAL_ID_PREFIX}{state.next_internal_id}"
        state.next_internal_id += 1
        coords_str, label_and_style = parts
    else:
        raise ParseError(f"invalid box definition: '{line}'")

    if box_id in state.seen_ids:
        raise ParseError(f"duplicate box ID '{box_id}'")

    coords_str = coords_str.strip()
    auto_arrow = coords_str.startswith(">")
    touch_left = not auto_arrow and coords_str.startswith("|")
    if auto_arrow:
        if not state.previous_box_id:
            raise ParseError(
                f"first box (label '{box_id}') cannot have auto-arrow prefix '>'"
            )
        coords_str = coords_str[1:]
    elif touch_left:
        if not state.previous_box_id:
            raise ParseError(
                f"first box (label '{box_id}') cannot have touch-left prefix '|'"
            )
        coords_str = coords_str[1:]

    coords = coords_str.split(",")
    if len(coords) not in (2, 3, 4):
        raise ParseError(f"invalid coordinate definition: '{line}'")

    try:
        coord_x = parse_coordinate(coords[0])
    except ParseError as err:
        raise ParseError(f"invalid X coordinate in line: '{line}'") from err
    try:
        coord_y = parse_coordinate(coords[1])
    except ParseError as err:
        raise ParseError(f"invalid Y coordinate in line: '{line}'") from err

    grid_width, grid_height = _parse_box_size(coords, box_id, line)

    if (
        not state.previous_box_id
        and state.container is None
        and (coord_x.is_relative or coord_y.is_relative)
    ):
        raise ParseError(
            f"first box (label '{box_id}') cannot use relative coordinates"
        )

    if touch_left:
        if not coord_y.is_relative or coord_y.value != 0:
            raise ParseError(
                f"box '{box_id}': touch-left prefix '|' requires Y coordinate "
                "to be 0 (same row as previous box)"
            )
        if not coord_x.is_relative or coord_x.value <= 0:
            raise ParseError(
                f"box '{box_id}': touch-left prefix '|' requires X coordinate "
                f"to be relative with '+' prefix (e.g. '+2'), got "
                f"relative={coord_x.is_relative} value={coord_x.value}"
            )

    base_x = state.container.base_x if state.container else 0
    base_y = state.container.base_y if state.container else 0
    grid_x = _resolve_axis(coord_x, state.previous_grid_x, base_x)
    grid_y = _resolve_axis(coord_y, state.previous_grid_y, base_y)
    if grid_x < 1:
        raise ParseError(
            f"box '{box_id}': GridX coordinate resolved to invalid value "
            f"{grid_x} (must be >= 1)"
        )
    if grid_y < 1:
        raise ParseError(
            f"box '{box_id}': GridY coordinate resolved to invalid value "
            f"{grid_y} (must be >= 1)"
        )

    label_and_style = label_and_style.strip()
    group = ""
    at_idx = label_and_style.rfind(" @")
    if at_idx >= 0:
        group = label_and_style[at_idx + 2 :].strip()
        label_and_style = label_and_style[:at_idx].strip()

    label, _, style_str = label_and_style.partition(",")
    styles = parse_box_styles(style_str.strip(), state.custom_colors)

    state.spec.boxes.append(
        BoxSpec(
            id=box_id,
            grid_x=grid_x,
            grid_y=grid_y,
            grid_width=grid_width,
            grid_height=grid_height,
            label=label.strip(),
            color=styles.background_color,
            border_color=styles.border_color,
            border_width=styles.border_width,
            font_size=styles.font_size,
            text_color=styles.text_color,
            touch_left=touch_left,
            group=group,
        )
    )
    state.seen_ids.add(box_id)

    if group:
        state.box_groups.append((box_id, group))

    if auto_arrow:
        state.spec.arrows.append(ArrowSpec(from_id=state.previous_box_id, to_id=box_id))

    state.previous_box_id = box_id
    state.previous_grid_x = grid_x
    state.previous_grid_y = grid_y


def _parse_box_size(coords: list[str], box_id: str, line: str) -> tuple[float, int]:
    """Parse the optional width and height fields of a box coordinate list."""
    grid_width = DEFAULT_GRID_WIDTH
    grid_height = DEFAULT_GRID_HEIGHT

    if len(coords) >= 3:
        try:
            grid_width = parse_number_or_fraction(coords[2])
        except ParseError as err:
            raise ParseError(f"invalid width in line: '{line}'") from err
        if not math.isfinite(grid_width):
            raise ParseError(f"invalid width in line: '{line}'")

    if len(coords) == 4:
        try:
            grid_height = _parse_int(coords[3].strip())
        except ValueError as err:
            raise ParseError(f"invalid height in line: '{line}'") from err

    if grid_width < MIN_GRID_WIDTH:
        raise ParseError(
            f"box '{box_id}': GridWidth must be >= {MIN_GRID_WIDTH}, "
            f"got {grid_width:.1f}"
        )
    if grid_width > MAX_GRID_WIDTH:
        raise ParseError(
            f"box '{box_id}': GridWidth must be <= {MAX_GRID_WIDTH:.0f}, "
            f"got {grid_width:g}"
        )
    if grid_height < MIN_GRID_HEIGHT:
        raise ParseError(
            f"box '{box_id}': GridHeight must be >= {MIN_GRID_HEIGHT}, "
            f"got {grid_height}"
        )
    return grid_width, grid_height


def _validate_arrows(spec: DiagramSpec) -> None:
    valid_ids = set(spec.box_ids())
    for arrow in spec.arrows:
        for endpoint in (arrow.from_id, arrow.to_id):
            if endpoint not in valid_ids:
                raise ParseError(
                    f"arrow '{arrow.from_id} -> {arrow.to_id}' references "
                    f"non-existent box label '{endpoint}'"
                )


def _build_groups(state: _ParserState) -> list[GroupDef]:
    """Assemble groups in first-seen order from box-to-group associations."""
    members: dict[str, list[str]] = {}
    for box_id, group in state.box_groups:
        members.setdefault(group, []).append(box_id)

    return [
        GroupDef(name=name, label=state.group_labels.get(name, name), box_ids=box_ids)
        for name, box_ids in members.items()
    ]
