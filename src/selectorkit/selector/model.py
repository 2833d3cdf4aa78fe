"""Selector model: fragment kinds, combinators, and selector values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SelectorKind(Enum):
    """Kinds of selector fragment, declared in canonical CSS order.

    Rank is the position in that order:
        0 = type (div)
        1 = id (#main)
        2 = class (.container)
        3 = attribute ([href])
        4 = pseudo-class (:focus)
        5 = pseudo-element (::before)
    """

    TYPE = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return _RANKS.index(self)

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS = list(SelectorKind)

_UNIQUE_KINDS = frozenset(
    {SelectorKind.TYPE, SelectorKind.ID, SelectorKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[SelectorKind, tuple[str, str]] = {
    SelectorKind.TYPE: ("", ""),
    SelectorKind.ID: ("#", ""),
    SelectorKind.CLASS: (".", ""),
    SelectorKind.ATTRIBUTE: ("[", "]"),
    SelectorKind.PSEUDO_CLASS: (":", ""),
    SelectorKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """CSS combinators that relate two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a compound selector."""

    kind: SelectorKind
    value: str

    @property
    def text(self) -> str:
        return self.kind.render(self.value)


@dataclass(frozen=True)
class Selector:
    """A compound selector: fragments in the order they were appended.

    Every fluent method returns a new Selector, so a partially built value
    can be shared as the prefix of several selectors.

    Example:
        >>> Selector().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
    """

    fragments: tuple[Fragment, ...] = ()

    def count(self, kind: SelectorKind) -> int:
        """Number of fragments of *kind* already appended."""
        return sum(1 for fragment in self.fragments if fragment.kind is kind)

    # --- fluent appends -------------------------------------------------------

    def append(self, kind: SelectorKind, value: str) -> Selector:
        from selectorkit.selector.builder import append_fragment

        return append_fragment(self, kind, value)

    def element(self, value: str) -> Selector:
        return self.append(SelectorKind.TYPE, value)

    def id(self, value: str) -> Selector:
        return self.append(SelectorKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(SelectorKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(SelectorKind.PSEUDO_ELEMENT, value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(
        self,
        left: Selector | CombinedSelector,
        combinator: Combinator | str,
        right: Selector | CombinedSelector,
    ) -> CombinedSelector:
        """Start a chain from *left*, *combinator* and *right*.

        The fragments of this selector take no part in the chain.
        """
        from selectorkit.selector.builder import combine

        return combine(left, combinator, right)

    # --- rendering ------------------------------------------------------------

    @property
    def segments(self) -> tuple[str, ...]:
        """Chain segments this value contributes when combined."""
        return (self.stringify(),)

    def stringify(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    render = stringify

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Compound selectors joined by combinators.

    ``chain`` alternates rendered compound selectors and combinator symbols.
    """

    chain: tuple[str, ...]

    @property
    def segments(self) -> tuple[str, ...]:
        return self.chain

    def combine(
        self,
        left: Selector | CombinedSelector,
        combinator: Combinator | str,
        right: Selector | CombinedSelector,
    ) -> CombinedSelector:
        """Return this chain unchanged; the first combine wins."""
        from selectorkit.selector.builder import recombine

        return recombine(self)

    def stringify(self) -> str:
        return " ".join(self.chain)

    render = stringify

    def __str__(self) -> str:
        return self.stringify()
