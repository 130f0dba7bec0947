"""Selector model: fragment kinds, fragments, and immutable selector values.

A simple selector is a single run of fragments such as
``element#id.class[attr]:pseudo-class::pseudo-element``. Within a run the
fragment kinds must appear in that order, and element, id and
pseudo-element may each appear at most once. Combined selectors join runs
with a combinator and are not extended further.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from objtasks.selector.errors import SelectorError, SelectorErrorKind

__all__ = [
    "COMBINATORS",
    "FragmentKind",
    "Fragment",
    "Selector",
    "CombinedSelector",
]

logger = logging.getLogger(__name__)

# Descendant, next-sibling, subsequent-sibling, child.
COMBINATORS: frozenset[str] = frozenset({" ", "+", "~", ">"})


class FragmentKind(Enum):
    """The kind of a selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> int | None:
        """Position in the required run order, ``None`` for combinators."""
        return _RANKS.get(self)

    @property
    def unique(self) -> bool:
        """True if the kind may appear at most once per run."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        return _FORMATS[self].format(value)


_RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_FORMATS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
    FragmentKind.COMBINATOR: " {} ",
}


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a selector, e.g. ``Fragment(FragmentKind.ID, "main")``."""

    kind: FragmentKind
    value: str

    @property
    def rank(self) -> int | None:
        return self.kind.rank

    def __str__(self) -> str:
        return self.kind.render(self.value)


@dataclass(frozen=True)
class _RenderedSelector:
    fragments: tuple[Fragment, ...] = ()

    def stringify(self) -> str:
        """Render the fragments as CSS selector text."""
        return "".join(str(fragment) for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class Selector(_RenderedSelector):
    """A single run of fragments, extended by returning new selectors.

    Every fragment method validates the new fragment against the run and
    raises :class:`SelectorError` before anything is built, so the receiver
    is never affected by a rejected call.
    """

    def element(self, value: str) -> Selector:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- validation -----------------------------------------------------------

    def _append(self, kind: FragmentKind, value: str) -> Selector:
        fragment = Fragment(kind=kind, value=value)
        run = self._current_run()
        if kind.unique and any(f.kind is kind for f in run):
            self._reject(fragment, SelectorErrorKind.DUPLICATE)
        if run and run[-1].rank > fragment.rank:
            self._reject(fragment, SelectorErrorKind.ORDERING)
        return Selector(fragments=self.fragments + (fragment,))

    def _current_run(self) -> tuple[Fragment, ...]:
        """Fragments after the last combinator."""
        for index in range(len(self.fragments) - 1, -1, -1):
            if self.fragments[index].kind is FragmentKind.COMBINATOR:
                return self.fragments[index + 1 :]
        return self.fragments

    def _reject(self, fragment: Fragment, error: SelectorErrorKind) -> None:
        logger.debug(
            "Rejected %s fragment %r after '%s': %s",
            fragment.kind.value,
            fragment.value,
            self,
            error.value,
        )
        raise SelectorError(error)


@dataclass(frozen=True)
class CombinedSelector(_RenderedSelector):
    """Two or more runs joined by combinators.

    Combined selectors only render and combine further; they have no
    fragment methods.
    """

    @classmethod
    def join(
        cls,
        left: _RenderedSelector,
        combinator: str,
        right: _RenderedSelector,
    ) -> CombinedSelector:
        if combinator not in COMBINATORS:
            raise ValueError(f"Invalid combinator: {combinator!r}")
        link = Fragment(kind=FragmentKind.COMBINATOR, value=combinator)
        return cls(fragments=left.fragments + (link,) + right.fragments)
