"""Shape model: Rectangle and Circle dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from selectorkit.shapes.errors import ShapeError


def _number(data: Mapping[str, Any], key: str) -> float:
    """Return the numeric field *key*, rejecting missing and non-numeric values."""
    try:
        value = data[key]
    except KeyError as exc:
        raise ShapeError(f"Missing required field: {key!r}") from exc
    # bool is an int subclass but never a valid dimension
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeError(f"Field {key!r} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ShapeError(f"Field {key!r} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height, r.area()
        (10, 20, 200)
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rectangle:
        """Build a Rectangle from parsed JSON data, validating required fields."""
        return cls(width=_number(data, "width"), height=_number(data, "height"))


@dataclass(frozen=True)
class Circle:
    """A circle described by its radius."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2

    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Circle:
        return cls(radius=_number(data, "radius"))


def rectangle(width: float, height: float) -> Rectangle:
    """Return a Rectangle with the given dimensions."""
    return Rectangle(width=width, height=height)
