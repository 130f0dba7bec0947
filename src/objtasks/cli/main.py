"""Objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Objtasks - rectangles, JSON helpers and CSS selector building."""
    config = ObjtasksConfig(log_level="DEBUG") if verbose else ObjtasksConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.area import area  # noqa: E402
from objtasks.cli.roundtrip import roundtrip  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(roundtrip)
cli.add_command(selector)
