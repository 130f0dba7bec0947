"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with an area computed on demand.

    Fields are not validated and stay mutable; ``area()`` always reflects
    the current ``width`` and ``height``.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
