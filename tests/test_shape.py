import pytest

from shapekit.ellipse import Circle
from shapekit.rectangle import Rectangle, Square
from shapekit.shape import Shape, _format_number


def test_shape_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Shape()


def test_base_string_through_concrete_shape():
    assert Shape.__str__(Rectangle(2, 3)) == "{Shape}"
    assert Shape.__str__(Circle(1)) == "{Shape}"


def test_concrete_shapes_through_base_interface():
    shapes = [Rectangle(2, 3), Square(2)]
    assert [shape.area() for shape in shapes] == [6, 4]
    assert [shape.perimeter() for shape in shapes] == [10, 8]
    assert all(isinstance(shape, Shape) for shape in shapes)


@pytest.mark.parametrize("value", [3.0, 2.5, 0.125, -7.0])
def test_format_number_round_trips(value):
    assert float(_format_number(value)) == value


def test_format_number_drops_trailing_zero():
    assert _format_number(3.0) == "3"