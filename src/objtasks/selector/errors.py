"""Selector builder error types."""

from __future__ import annotations

from enum import Enum


class SelectorErrorKind(Enum):
    """Which rule a rejected fragment broke."""

    ORDERING = "ordering"
    DUPLICATE = "duplicate"


_MESSAGES: dict[SelectorErrorKind, str] = {
    SelectorErrorKind.ORDERING: (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    ),
    SelectorErrorKind.DUPLICATE: (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    ),
}


class SelectorError(Exception):
    """Raised when a fragment cannot be appended to a selector."""

    def __init__(self, kind: SelectorErrorKind) -> None:
        self.kind = kind
        super().__init__(_MESSAGES[kind])
