"""CLI command: objtasks selector -- build a CSS selector from fragment tokens.

Tokens are ``kind:value`` fragments or bare combinators::

    objtasks selector element:div id:main + element:table id:data
    div#main + table#data
"""

from __future__ import annotations

import sys
from typing import Sequence

import click

from objtasks.selector import (
    COMBINATORS,
    CombinedSelector,
    Selector,
    SelectorError,
    css_selector_builder,
)

# Token kind -> fragment method name.
_KIND_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def build_selector(tokens: Sequence[str]) -> Selector | CombinedSelector:
    """Build a selector from CLI tokens, combining runs right to left.

    Raises ``ValueError`` for malformed tokens and :class:`SelectorError`
    for fragments that break the ordering or uniqueness rules.
    """
    runs: list[Selector] = []
    combinators: list[str] = []
    current: Selector | None = None

    for token in tokens:
        if token in COMBINATORS:
            if current is None:
                raise ValueError(f"Combinator {token!r} must follow a fragment")
            runs.append(current)
            combinators.append(token)
            current = None
            continue

        kind, sep, value = token.partition(":")
        method = _KIND_METHODS.get(kind)
        if not sep or method is None:
            raise ValueError(f"Invalid fragment: {token!r}")
        target = css_selector_builder if current is None else current
        current = getattr(target, method)(value)

    if current is None:
        raise ValueError("Selector must end with a fragment")

    result: Selector | CombinedSelector = current
    for run, combinator in zip(reversed(runs), reversed(combinators)):
        result = css_selector_builder.combine(run, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build and print a CSS selector from TOKENS.

    Each token is KIND:VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: ' ', '+', '~', '>'.
    """
    try:
        built = build_selector(tokens)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(built.stringify())
