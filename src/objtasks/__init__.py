"""Objtasks: a rectangle value object, JSON helpers and a CSS selector builder."""

from objtasks.config import ObjtasksConfig
from objtasks.model import Rectangle
from objtasks.selector import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
    SelectorError,
    SelectorErrorKind,
    css_selector_builder,
)
from objtasks.serialization import deserialize, serialize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ObjtasksConfig",
    "Rectangle",
    "serialize",
    "deserialize",
    "css_selector_builder",
    "SelectorBuilder",
    "Selector",
    "CombinedSelector",
    "SelectorError",
    "SelectorErrorKind",
]
