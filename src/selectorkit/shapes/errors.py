"""Shape deserialization error types."""


class ShapeError(ValueError):
    """Raised when JSON data cannot be turned into a shape."""
