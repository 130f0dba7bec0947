"""The CSS selector builder facade.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

import logging

from objtasks.selector.model import CombinedSelector, Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)

_EMPTY = Selector()

AnySelector = Selector | CombinedSelector


class SelectorBuilder:
    """Stateless entry point that starts selector chains.

    Each method returns a new :class:`Selector`; chaining continues on the
    returned value, so one builder can be shared freely.
    """

    def element(self, value: str) -> Selector:
        return _EMPTY.element(value)

    def id(self, value: str) -> Selector:
        return _EMPTY.id(value)

    def class_(self, value: str) -> Selector:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> Selector:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return _EMPTY.pseudo_element(value)

    def combine(
        self, left: AnySelector, combinator: str, right: AnySelector
    ) -> CombinedSelector:
        """Join two selectors with *combinator* (``" "``, ``+``, ``~`` or ``>``).

        The sides are not re-validated against each other.
        """
        combined = CombinedSelector.join(left, combinator, right)
        logger.debug("Combined '%s' %r '%s'", left, combinator, right)
        return combined


css_selector_builder = SelectorBuilder()
