"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=SelectorKitConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", default=None, type=int, help="Indent JSON output by N spaces")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort JSON object keys")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None, sort_keys: bool) -> None:
    """selectorkit - build CSS selectors and round-trip shapes through JSON."""
    config = SelectorKitConfig(
        log_level=log_level.upper(), json_indent=indent, json_sort_keys=sort_keys
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.shapes import area, rectangle  # noqa: E402

cli.add_command(render)
cli.add_command(rectangle)
cli.add_command(area)
