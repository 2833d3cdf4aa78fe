"""Tests for shapes and their JSON round-trips."""

import math

import pytest

from selectorkit.shapes import Circle, Rectangle, ShapeError, from_json, rectangle, to_json


class TestRectangle:
    def test_factory(self) -> None:
        r = rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_is_frozen(self) -> None:
        r = Rectangle(1, 2)
        with pytest.raises(AttributeError):
            r.width = 5  # type: ignore[misc]

    def test_from_dict(self) -> None:
        assert Rectangle.from_dict({"width": 3, "height": 4.5}) == Rectangle(3, 4.5)


class TestCircle:
    def test_area_and_circumference(self) -> None:
        c = Circle(2)
        assert c.area() == pytest.approx(4 * math.pi)
        assert c.circumference() == pytest.approx(4 * math.pi)


class TestToJson:
    def test_list(self) -> None:
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self) -> None:
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_rectangle_omits_methods(self) -> None:
        assert to_json(rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_sort_keys(self) -> None:
        assert to_json({"width": 10, "height": 20}, sort_keys=True) == '{"height":20,"width":10}'

    def test_indent(self) -> None:
        assert to_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            to_json(object())


class TestFromJson:
    def test_rectangle_round_trip(self) -> None:
        r = from_json(Rectangle, to_json(rectangle(10, 20)))
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_circle(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert c == Circle(radius=10)
        assert c.area() == pytest.approx(100 * math.pi)

    def test_extra_fields_ignored(self) -> None:
        assert from_json(Circle, '{"radius":1,"color":"red"}') == Circle(1)

    def test_missing_field(self) -> None:
        with pytest.raises(ShapeError, match="height"):
            from_json(Rectangle, '{"width":10}')

    @pytest.mark.parametrize("value", ['"10"', "true", "null", "[1]"])
    def test_non_numeric_field(self, value: str) -> None:
        with pytest.raises(ShapeError, match="must be a number"):
            from_json(Circle, '{"radius":' + value + "}")

    def test_invalid_json(self) -> None:
        with pytest.raises(ShapeError, match="Invalid JSON"):
            from_json(Rectangle, "{width: 10")

    def test_not_an_object(self) -> None:
        with pytest.raises(ShapeError, match="Expected a JSON object"):
            from_json(Rectangle, "[10, 20]")

    def test_shape_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_json(Circle, "{}")

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_field(self, value: str) -> None:
        with pytest.raises(ShapeError, match="must be finite"):
            from_json(Rectangle, '{"width":' + value + ',"height":1}')
