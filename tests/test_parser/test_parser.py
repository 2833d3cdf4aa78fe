"""Tests for the builder-call expression parser."""

import pytest

from selectorkit.parser import ParseError, parse_expression
from selectorkit.selector import (
    CombinedSelector,
    DuplicateSelectorPart,
    OrderViolation,
    Selector,
    css_selector_builder as builder,
)


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_single_call(self) -> None:
        selector = parse_expression("element('div')")
        assert isinstance(selector, Selector)
        assert selector.stringify() == "div"

    def test_chain(self) -> None:
        selector = parse_expression("id('main').class('container').class('editable')")
        assert selector.stringify() == "#main.container.editable"

    def test_matches_builder(self) -> None:
        parsed = parse_expression("element('a').attr('href$=\".png\"').pseudoClass('focus')")
        built = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert parsed == built
        assert parsed.stringify() == 'a[href$=".png"]:focus'

    def test_double_quoted_with_escapes(self) -> None:
        selector = parse_expression('element("a").attr("title=\\"x\\"")')
        assert selector.stringify() == 'a[title="x"]'

    def test_snake_case_names(self) -> None:
        selector = parse_expression("pseudo_class('hover').pseudo_element('after')")
        assert selector.stringify() == ":hover::after"

    def test_whitespace_ignored(self) -> None:
        selector = parse_expression("  element( 'p' )\n  .pseudoElement( 'first-letter' )  ")
        assert selector.stringify() == "p::first-letter"


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple(self) -> None:
        selector = parse_expression(
            "combine(element('div').id('main'), '+', element('table').id('data'))"
        )
        assert isinstance(selector, CombinedSelector)
        assert selector.stringify() == "div#main + table#data"

    def test_nested(self) -> None:
        source = """
        combine(
            element('div').id('main').class('container').class('draggable'),
            '+',
            combine(
                element('table').id('data'),
                '~',
                combine(
                    element('tr').pseudoClass('nth-of-type(even)'),
                    ' ',
                    element('td').pseudoClass('nth-of-type(even)')
                )
            )
        )
        """
        assert parse_expression(source).stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_unknown_combinator(self) -> None:
        with pytest.raises(ParseError, match="Unknown combinator"):
            parse_expression("combine(element('a'), '|', element('b'))")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unknown_call(self) -> None:
        with pytest.raises(ParseError, match="Unknown selector call") as excinfo:
            parse_expression("element('a').tag('b')")
        assert excinfo.value.line == 1
        assert excinfo.value.column == 14

    def test_syntax_error(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_expression("element('a'")
        assert excinfo.value.__cause__ is not None

    def test_unquoted_argument(self) -> None:
        with pytest.raises(ParseError):
            parse_expression("element(div)")

    def test_empty_source(self) -> None:
        with pytest.raises(ParseError):
            parse_expression("")

    def test_builder_errors_propagate(self) -> None:
        with pytest.raises(DuplicateSelectorPart):
            parse_expression("id('a').id('b')")
        with pytest.raises(OrderViolation):
            parse_expression("class('a').element('div')")

    def test_error_keeps_source_and_location(self) -> None:
        source = "element('a').tag('b')"
        with pytest.raises(ParseError) as excinfo:
            parse_expression(source)
        assert excinfo.value.source == source
        assert excinfo.value.location == "line 1, column 14"

    def test_syntax_error_keeps_source(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_expression("element('a')).")
        assert excinfo.value.source == "element('a'))."

    def test_location_formats(self) -> None:
        assert ParseError("x").location == ""
        assert ParseError("x", line=3).location == "line 3"
        assert ParseError("x", line=2, column=5).location == "line 2, column 5"
