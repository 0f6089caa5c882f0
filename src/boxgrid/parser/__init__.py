"""Parsing of diagram text into a grid-level DiagramSpec."""

from __future__ import annotations

from boxgrid.parser.frontmatter import parse_frontmatter
from boxgrid.parser.model import (
    ArrowSpec,
    BoxSpec,
    BoxStyles,
    DiagramSpec,
    Frontmatter,
    GroupDef,
    LegendEntry,
    ParsedCoordinate,
)
from boxgrid.parser.spec import (
    ParseError,
    parse_coordinate,
    parse_diagram_spec,
    parse_number_or_fraction,
)
from boxgrid.parser.styles import parse_box_styles


def parse_document(text: str) -> tuple[Frontmatter, DiagramSpec]:
    """Split off front matter and parse the rest of *text*.

    Custom colors from the front matter are available to box style codes.
    """
    frontmatter, body = parse_frontmatter(text)
    spec = parse_diagram_spec(body, frontmatter.colors)
    return frontmatter, spec


__all__ = [
    "ArrowSpec",
    "BoxSpec",
    "BoxStyles",
    "DiagramSpec",
    "Frontmatter",
    "GroupDef",
    "LegendEntry",
    "ParseError",
    "ParsedCoordinate",
    "parse_box_styles",
    "parse_coordinate",
    "parse_diagram_spec",
    "parse_document",
    "parse_frontmatter",
    "parse_number_or_fraction",
]
