from selectorkit.selector.builder import (
    CssSelectorBuilder,
    append_fragment,
    combine,
    css_selector_builder,
    render,
)
from selectorkit.selector.errors import DuplicateSelectorPart, OrderViolation, SelectorError
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
    "SelectorError",
    "DuplicateSelectorPart",
    "OrderViolation",
    "Combinator",
    "CombinedSelector",
    "Fragment",
    "Selector",
    "SelectorKind",
]
