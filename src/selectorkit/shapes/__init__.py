from selectorkit.shapes.errors import ShapeError
from selectorkit.shapes.model import Circle, Rectangle, rectangle
from selectorkit.shapes.serialization import JsonShape, from_json, to_json

__all__ = [
    "ShapeError",
    "Circle",
    "Rectangle",
    "rectangle",
    "JsonShape",
    "from_json",
    "to_json",
]
