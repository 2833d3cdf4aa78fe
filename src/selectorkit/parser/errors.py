"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a builder-call expression cannot be turned into a selector.

    ``source`` is the expression text; ``line`` and ``column`` (1-based) point
    at the offending token when Lark reports one.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)

    @property
    def location(self) -> str:
        """``"line L, column C"``, or an empty string when unknown."""
        if self.line is None:
            return ""
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"
