"""Lark Transformer that turns a builder-call expression into a selector."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lark import Lark, Token, Transformer

from selectorkit.parser.errors import ParseError
from selectorkit.selector.builder import css_selector_builder
from selectorkit.selector.model import CombinedSelector, Selector

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)

# Call names accepted in expressions, mapped to builder method names.
_CALLS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "class_": "class_",
    "attr": "attr",
    "pseudoClass": "pseudo_class",
    "pseudo_class": "pseudo_class",
    "pseudoElement": "pseudo_element",
    "pseudo_element": "pseudo_element",
}

_ESCAPE_RE = re.compile(r"\\(.)")


class _Call:
    def __init__(self, name: str, value: str, line: int | None, column: int | None):
        self.name = name
        self.value = value
        self.line = line
        self.column = column


class _Compound:
    def __init__(self, calls: list[_Call]):
        self.calls = calls


class _Combination:
    def __init__(self, left: _Compound | _Combination, combinator: str, right: _Compound | _Combination):
        self.left = left
        self.combinator = combinator
        self.right = right


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into intermediate call records."""

    def STRING(self, token: Token) -> str:
        return _ESCAPE_RE.sub(r"\1", str(token)[1:-1])

    def call(self, items: list[object]) -> _Call:
        name_token = items[0]
        return _Call(
            str(name_token),
            str(items[1]),
            line=getattr(name_token, "line", None),
            column=getattr(name_token, "column", None),
        )

    def compound(self, items: list[_Call]) -> _Compound:
        return _Compound(list(items))

    def combination(self, items: list[object]) -> _Combination:
        left, combinator, right = items
        return _Combination(left, str(combinator), right)  # type: ignore[arg-type]

    def start(self, items: list[object]) -> _Compound | _Combination:
        return items[0]  # type: ignore[return-value]


def _build_compound(compound: _Compound) -> Selector:
    """Replay the calls of one compound selector against the builder."""
    target: object = css_selector_builder
    for call in compound.calls:
        method_name = _CALLS.get(call.name)
        if method_name is None:
            raise ParseError(
                f"Unknown selector call: {call.name!r}",
                line=call.line,
                column=call.column,
            )
        target = getattr(target, method_name)(call.value)
    return target  # type: ignore[return-value]


def _build(node: _Compound | _Combination) -> Selector | CombinedSelector:
    if isinstance(node, _Compound):
        return _build_compound(node)
    left = _build(node.left)
    right = _build(node.right)
    try:
        return css_selector_builder.combine(left, node.combinator, right)
    except ValueError as exc:
        raise ParseError(f"Unknown combinator: {node.combinator!r}") from exc


def parse_expression(source: str) -> Selector | CombinedSelector:
    """Parse a builder-call expression and build the selector it describes.

    Ordering and duplicate errors raised by the builder propagate unchanged.

    Example:
        >>> parse_expression("element('a').attr('href').pseudoClass('focus')").stringify()
        'a[href]:focus'
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        # UnexpectedEOF reports -1 for both.
        if line is not None and line < 1:
            line = column = None
        raise ParseError(str(e), line=line, column=column, source=source) from e
    logger.debug("Parsed expression %r", source)
    try:
        return _build(ExpressionTransformer().transform(tree))
    except ParseError as exc:
        exc.source = source
        raise
