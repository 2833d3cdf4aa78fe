"""CLI command: selectorkit render -- build a selector from builder calls."""

from __future__ import annotations

import sys

import click

from selectorkit.parser import ParseError, parse_expression
from selectorkit.selector.errors import SelectorError


@click.command()
@click.argument("expression")
def render(expression: str) -> None:
    """Render a selector written as builder calls.

    Example: selectorkit render "combine(element('div').id('main'), '+', element('table'))"
    """
    try:
        selector = parse_expression(expression)
    except ParseError as exc:
        location = f" ({exc.location})" if exc.location else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
