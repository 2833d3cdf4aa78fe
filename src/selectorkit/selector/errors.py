"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import SelectorKind


class SelectorError(Exception):
    """Base exception for invalid selector construction sequences."""

    def __init__(self, message: str, kind: SelectorKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateSelectorPart(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""


class OrderViolation(SelectorError):
    """Raised when a fragment follows one of a higher rank."""
