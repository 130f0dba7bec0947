from objtasks.selector.builder import SelectorBuilder, css_selector_builder
from objtasks.selector.errors import SelectorError, SelectorErrorKind
from objtasks.selector.model import (
    COMBINATORS,
    CombinedSelector,
    Fragment,
    FragmentKind,
    Selector,
)

__all__ = [
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorError",
    "SelectorErrorKind",
    "COMBINATORS",
    "FragmentKind",
    "Fragment",
    "Selector",
    "CombinedSelector",
]
