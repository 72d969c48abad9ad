"""CLI for statusline-layout."""

from __future__ import annotations

import logging

import click

from statusline_layout import __version__
from statusline_layout.config import Config, parse_boundary_align
from statusline_layout.layout import available_width, compute_layout, compute_padding
from statusline_layout.model import (
    AlignmentSpec,
    BoundaryAlign,
    Geometry,
    TruncationPolicy,
)
from statusline_layout.render import render_line
from statusline_layout.themes import THEMES


def _parse_align(ctx: click.Context, param: click.Parameter, value: str) -> BoundaryAlign:
    try:
        return parse_boundary_align(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _parse_pair(ctx: click.Context, param: click.Parameter, value: str) -> tuple[int, int]:
    parts = value.split(",")
    if len(parts) != 2:
        raise click.BadParameter(f"expected LEFT,RIGHT but got {value!r}")
    try:
        left, right = (int(p) for p in parts)
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not a pair of integers") from e
    return left, right


def geometry_options(func):
    """Shared alignment and window geometry options."""
    options = [
        click.option("--width", type=click.IntRange(min=0), default=80, show_default=True,
                     help="Text area width in characters"),
        click.option("--align-left", callback=_parse_align, default="window",
                     show_default=True,
                     help="Left boundary as BOUNDARY[:CHARS[:PIXELS]]"),
        click.option("--align-right", callback=_parse_align, default="window",
                     show_default=True,
                     help="Right boundary as BOUNDARY[:CHARS[:PIXELS]]"),
        click.option("--margins", callback=_parse_pair, default="0,0", show_default=True,
                     help="Left,right margin widths in pixels"),
        click.option("--fringes", callback=_parse_pair, default="0,0", show_default=True,
                     help="Left,right fringe widths in pixels"),
        click.option("--scroll-bar", type=click.IntRange(min=0), default=0,
                     show_default=True, help="Scroll bar width in pixels"),
        click.option("--scroll-bar-left", is_flag=True,
                     help="Scroll bar is on the left of the window"),
        click.option("--fringes-outside-margins", is_flag=True,
                     help="Fringes are drawn outside the margins"),
        click.option("--char-width", type=click.IntRange(min=1), default=1,
                     show_default=True, help="Pixel width of one character cell"),
        click.option("--graphical", is_flag=True, help="Treat the display as graphical"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_geometry(
    width: int,
    margins: tuple[int, int],
    fringes: tuple[int, int],
    scroll_bar: int,
    scroll_bar_left: bool,
    fringes_outside_margins: bool,
    char_width: int,
    graphical: bool,
) -> Geometry:
    try:
        return Geometry(
            window_width=width,
            left_margin=margins[0],
            right_margin=margins[1],
            left_fringe=fringes[0],
            right_fringe=fringes[1],
            scroll_bar_width=scroll_bar,
            scroll_bar_on_left=scroll_bar_left,
            fringes_outside_margins=fringes_outside_margins,
            graphical=graphical,
            char_width=char_width,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """statusline-layout: Preview two-part status lines aligned to window boundaries."""


@cli.command()
@click.argument("left")
@click.argument("right")
@geometry_options
@click.option("--policy", type=click.Choice([p.value for p in TruncationPolicy]),
              default="left", show_default=True,
              help="Which segment is truncated when the line is too narrow")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="unicode",
              help="Glyph theme (default: unicode)")
@click.option("--pixel-exact", is_flag=True,
              help="Place the right segment by pixel width (graphical only)")
@click.option("--frame", is_flag=True, help="Mark the window edges with '|'")
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions")
def render(
    left: str,
    right: str,
    width: int,
    align_left: BoundaryAlign,
    align_right: BoundaryAlign,
    margins: tuple[int, int],
    fringes: tuple[int, int],
    scroll_bar: int,
    scroll_bar_left: bool,
    fringes_outside_margins: bool,
    char_width: int,
    graphical: bool,
    policy: str,
    theme: str,
    pixel_exact: bool,
    frame: bool,
    verbose: bool,
) -> None:
    """Lay out LEFT and RIGHT on one line and print it."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    geometry = _build_geometry(width, margins, fringes, scroll_bar, scroll_bar_left,
                               fringes_outside_margins, char_width, graphical)
    config = Config.from_theme(
        THEMES[theme],
        alignment=AlignmentSpec(align_left, align_right),
        policy=TruncationPolicy.parse(policy),
        pixel_exact=pixel_exact,
    )

    result = compute_layout(left, right, geometry, config)
    line = render_line(result, geometry)
    if frame:
        line = f"|{line}|"
    click.echo(line)


@cli.command()
@geometry_options
def pad(
    width: int,
    align_left: BoundaryAlign,
    align_right: BoundaryAlign,
    margins: tuple[int, int],
    fringes: tuple[int, int],
    scroll_bar: int,
    scroll_bar_left: bool,
    fringes_outside_margins: bool,
    char_width: int,
    graphical: bool,
) -> None:
    """Show the padding directives and available width for an alignment."""
    geometry = _build_geometry(width, margins, fringes, scroll_bar, scroll_bar_left,
                               fringes_outside_margins, char_width, graphical)
    alignment = AlignmentSpec(align_left, align_right)
    left_pad, right_pad = compute_padding(alignment)

    click.echo(f"Available: {available_width(geometry, alignment)} characters")
    click.echo(f"Left pad: {_describe(left_pad)}")
    click.echo(f"Right pad: {_describe(right_pad)}")


def _describe(directive) -> str:
    return (
        f"align to {directive.boundary.value} ({directive.edge.value} edge)"
        f" {directive.char_offset:+d} chars {directive.pixel_offset:+d} px"
    )
