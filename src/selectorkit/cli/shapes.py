"""CLI commands: selectorkit rectangle / area -- shape JSON round-trips."""

from __future__ import annotations

import math
import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.shapes import Circle, Rectangle, ShapeError, from_json, to_json
from selectorkit.shapes import rectangle as make_rectangle

_SHAPES = {
    "rectangle": Rectangle,
    "circle": Circle,
}


def _finite(ctx: click.Context, param: click.Parameter, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter(f"must be a finite number, got {value}")
    return value


@click.command()
@click.argument("width", type=float, callback=_finite)
@click.argument("height", type=float, callback=_finite)
@click.pass_obj
def rectangle(config: SelectorKitConfig, width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    # Keep whole numbers as ints so 10 prints as 10, not 10.0.
    w = int(width) if width.is_integer() else width
    h = int(height) if height.is_integer() else height
    shape = make_rectangle(w, h)
    click.echo(to_json(shape, indent=config.json_indent, sort_keys=config.json_sort_keys))


@click.command()
@click.argument("shape", type=click.Choice(sorted(_SHAPES)))
@click.argument("json_text")
def area(shape: str, json_text: str) -> None:
    """Deserialize JSON_TEXT as SHAPE and print its area."""
    try:
        value = from_json(_SHAPES[shape], json_text)
    except ShapeError as exc:
        click.echo(f"Invalid {shape}: {exc}", err=True)
        sys.exit(1)

    click.echo(f"{value.area():g}")
