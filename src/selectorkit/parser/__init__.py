from selectorkit.parser.errors import ParseError
from selectorkit.parser.transformer import parse_expression

__all__ = ["ParseError", "parse_expression"]
