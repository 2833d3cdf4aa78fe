"""selectorkit -- fluent CSS selector builder and shape JSON helpers."""

__version__ = "0.1.0"

from selectorkit.selector import (
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateSelectorPart,
    OrderViolation,
    Selector,
    SelectorError,
    SelectorKind,
    css_selector_builder,
)
from selectorkit.shapes import Circle, Rectangle, ShapeError, from_json, rectangle, to_json

__all__ = [
    "__version__",
    # selector
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "Selector",
    "SelectorKind",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSelectorPart",
    "OrderViolation",
    # shapes
    "Circle",
    "Rectangle",
    "ShapeError",
    "rectangle",
    "to_json",
    "from_json",
]
