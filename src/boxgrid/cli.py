"""CLI for boxgrid."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from boxgrid import __version__
from boxgrid.debug import generate_debug_output, write_debug_json
from boxgrid.layout import DiagramConfig, compute_layout
from boxgrid.layout.constants import STRETCH, VERTICAL_GAP_UNITS
from boxgrid.parser import ParseError, parse_diagram_spec, parse_frontmatter
from boxgrid.render import load_custom_font, render_svg

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """boxgrid: Generate box-and-arrow SVG diagrams from text definitions."""


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--stretch", type=float, default=STRETCH,
              help="Horizontal stretch factor (1.0 = normal, 0.8 = 80% width)")
@click.option("--vertical-gap", type=float, default=VERTICAL_GAP_UNITS,
              help="Vertical gap between boxes in grid units (default: 0.5)")
@click.option("--font", "font_path", type=click.Path(path_type=Path), default=None,
              help="WOFF2 font to embed. Overrides the font: front matter key")
@click.option("--debug", "debug_path", type=click.Path(path_type=Path), default=None,
              help="Also write routing diagnostics to this JSON file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def render(
    input_file: Path,
    output: Path | None,
    stretch: float,
    vertical_gap: float,
    font_path: Path | None,
    debug_path: Path | None,
    verbose: bool,
) -> None:
    """Render a box diagram definition to SVG."""
    setup_logging(verbose)

    frontmatter, body = parse_frontmatter(input_file.read_text())

    font = None
    font_source = font_path or (Path(frontmatter.font) if frontmatter.font else None)
    if font_source is not None:
        try:
            font = load_custom_font(font_source)
        except OSError as e:
            click.echo(f"Error loading font '{font_source}': {e}", err=True)
            raise SystemExit(1)
        logger.debug("Embedding font %s from %s", font.name, font_source)

    try:
        spec = parse_diagram_spec(body, frontmatter.colors)
    except ParseError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    config = DiagramConfig(stretch=stretch, vertical_gap_units=vertical_gap)
    diagram, box_data = compute_layout(
        spec,
        config,
        legend=frontmatter.legend,
        groups=spec.groups,
        arrow_flow=frontmatter.arrow_flow,
    )
    diagram.x_label = frontmatter.x_label
    diagram.y_label = frontmatter.y_label
    diagram.legend = frontmatter.legend
    diagram.custom_colors = frontmatter.colors

    svg = render_svg(diagram, font=font)

    if output is None:
        output = input_file.with_suffix(".svg")
    output.write_text(svg)
    click.echo(f"Rendered {len(diagram.boxes)} boxes, "
               f"{len(diagram.arrows)} arrows, "
               f"{len(diagram.groups)} groups -> {output}")
    if diagram.skipped_arrows:
        click.echo(f"Warning: {len(diagram.skipped_arrows)} arrow(s) could not "
                   f"be routed", err=True)

    if debug_path is not None:
        write_debug_json(debug_path, generate_debug_output(diagram, box_data))
        click.echo(f"Debug output written: {debug_path}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a box diagram definition."""
    frontmatter, body = parse_frontmatter(input_file.read_text())
    try:
        spec = parse_diagram_spec(body, frontmatter.colors)
    except ParseError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(spec.boxes)} boxes, "
               f"{len(spec.arrows)} arrows, "
               f"{len(spec.groups)} groups")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a box diagram definition."""
    frontmatter, body = parse_frontmatter(input_file.read_text())
    try:
        spec = parse_diagram_spec(body, frontmatter.colors)
    except ParseError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"X label: {frontmatter.x_label or '(none)'}")
    click.echo(f"Y label: {frontmatter.y_label or '(none)'}")
    click.echo(f"Arrow flow: {frontmatter.arrow_flow or '(default)'}")
    click.echo(f"Boxes: {len(spec.boxes)}")
    for box in spec.boxes:
        label = box.label.replace("\n", " ") or "(no label)"
        click.echo(f"  {box.id} ({box.grid_x},{box.grid_y}): {label}")
    click.echo(f"Arrows: {len(spec.arrows)}")
    for arrow in spec.arrows:
        flow = f" | {arrow.flow}" if arrow.flow else ""
        click.echo(f"  {arrow.from_id} -> {arrow.to_id}{flow}")
    click.echo(f"Groups: {len(spec.groups)}")
    for group in spec.groups:
        click.echo(f"  {group.label}: {len(group.box_ids)} boxes")
    if frontmatter.legend:
        click.echo(f"Legend: {len(frontmatter.legend)} entries")
        for entry in frontmatter.legend:
            click.echo(f"  {entry.style} = {entry.label}")
