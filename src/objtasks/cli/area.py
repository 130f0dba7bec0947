"""CLI command: objtasks area -- compute a rectangle's area."""

from __future__ import annotations

import click

from objtasks.config import ObjtasksConfig
from objtasks.model import Rectangle
from objtasks.serialization import serialize


def format_number(value: float) -> str:
    """Render whole floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def area(config: ObjtasksConfig | None, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if as_json:
        click.echo(serialize(rect, config=config))
        return
    click.echo(format_number(rect.area()))
