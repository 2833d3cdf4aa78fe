"""Selector builder: ordering checks, combination, and the builder facade."""

from __future__ import annotations

import logging

from selectorkit.selector.errors import DuplicateSelectorPart, OrderViolation
from selectorkit.selector.model import (
    Combinator,
    CombinedSelector,
    Fragment,
    Selector,
    SelectorKind,
)

__all__ = [
    "append_fragment",
    "combine",
    "render",
    "CssSelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)

_DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


def _check_duplicate(selector: Selector, kind: SelectorKind) -> None:
    if kind.unique and selector.count(kind):
        raise DuplicateSelectorPart(_DUPLICATE_MESSAGE, kind=kind)


def _check_order(selector: Selector, kind: SelectorKind) -> None:
    later = [other for other in SelectorKind if other.rank > kind.rank]
    if any(selector.count(other) for other in later):
        raise OrderViolation(_ORDER_MESSAGE, kind=kind)


def append_fragment(selector: Selector, kind: SelectorKind, value: str) -> Selector:
    """Return a copy of *selector* with a *kind* fragment appended.

    Raises:
        DuplicateSelectorPart: *kind* is unique and already present.
        OrderViolation: a fragment of higher rank was appended earlier.
    """
    _check_duplicate(selector, kind)
    _check_order(selector, kind)
    logger.debug("Appending %s fragment %r", kind.name, value)
    return Selector(fragments=selector.fragments + (Fragment(kind, value),))


def combine(
    left: Selector | CombinedSelector,
    combinator: Combinator | str,
    right: Selector | CombinedSelector,
) -> CombinedSelector:
    """Join two selectors with a combinator into a flat chain.

    A combined *right* operand is flattened into the chain after the
    combinator, so nested right-associated combines read left to right.
    Empty segments are dropped.
    """
    symbol = Combinator(combinator).value
    segments = (*left.segments, symbol, *right.segments)
    chain = tuple(segment for segment in segments if segment)
    logger.debug("Combined chain: %r", chain)
    return CombinedSelector(chain=chain)


def recombine(target: CombinedSelector) -> CombinedSelector:
    """Combine onto an existing chain: the existing chain is kept as is."""
    logger.warning(
        "Ignoring combine on an already combined selector %r; keeping the first chain",
        target.stringify(),
    )
    return target


def render(selector: Selector | CombinedSelector) -> str:
    """Render a selector or combined chain to its CSS string."""
    return selector.stringify()


class CssSelectorBuilder:
    """Facade whose entry points each start a fresh selector.

    Example:
        >>> builder = CssSelectorBuilder()
        >>> builder.id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> builder.combine(
        ...     builder.element("div").id("main"), "+", builder.element("table").id("data")
        ... ).stringify()
        'div#main + table#data'
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(
        self,
        left: Selector | CombinedSelector,
        combinator: Combinator | str,
        right: Selector | CombinedSelector,
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
