"""CLI command: objtasks roundtrip -- rebuild a rectangle from JSON."""

from __future__ import annotations

import json
import sys

import click

from objtasks.cli.area import format_number
from objtasks.model import Rectangle
from objtasks.serialization import deserialize


@click.command()
@click.argument("text")
def roundtrip(text: str) -> None:
    """Rebuild a rectangle from JSON TEXT and print its area.

    Values are taken positionally as width then height.
    """
    try:
        rect = deserialize(Rectangle, text)
    except json.JSONDecodeError as exc:
        click.echo(f"JSON error: {exc}", err=True)
        sys.exit(1)
    except TypeError as exc:
        click.echo(f"Cannot build rectangle: {exc}", err=True)
        sys.exit(1)

    click.echo(f"width={rect.width} height={rect.height}")
    click.echo(f"area={format_number(rect.area())}")
