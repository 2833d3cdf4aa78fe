"""JSON helpers: serialize values and deserialize them into typed shapes."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Mapping, Protocol, TypeVar

from selectorkit.shapes.errors import ShapeError

__all__ = ["JsonShape", "to_json", "from_json"]

T = TypeVar("T", covariant=True)


class JsonShape(Protocol[T]):
    """A type that can be rebuilt from a parsed JSON object."""

    def from_dict(self, data: Mapping[str, Any]) -> T: ...


def _default(value: object) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *value*.

    Keys keep insertion order unless *sort_keys* is set. Without *indent* the
    output is compact: ``[1,2,3]``, ``{"width":10,"height":20}``.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        value,
        default=_default,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
    )


def from_json(shape: JsonShape[T], text: str) -> T:
    """Parse *text* and build a *shape* instance from the resulting object.

    Example:
        >>> from selectorkit.shapes import Circle
        >>> from_json(Circle, '{"radius":10}')
        Circle(radius=10)
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ShapeError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ShapeError(f"Expected a JSON object, got {type(data).__name__}")
    return shape.from_dict(data)
