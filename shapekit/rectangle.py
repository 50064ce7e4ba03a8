"""Rectangles and squares."""

from __future__ import annotations

from .shape import Shape, _format_number


class Rectangle(Shape):
    """A rectangle given by its base and height."""

    def __init__(self, base: float, height: float) -> None:
        self.base = base
        self.height = height

    def __str__(self) -> str:
        return (
            f"{{Rectangle {super().__str__()}"
            f" base: {_format_number(self.base)}"
            f", height: {_format_number(self.height)}}}"
        )

    def area(self) -> float:
        return self.base * self.height

    def perimeter(self) -> float:
        return 2 * self.base + 2 * self.height


class Square(Rectangle):
    """A rectangle whose four sides are equal."""

    def __init__(self, length: float) -> None:
        super().__init__(length, length)

    def __str__(self) -> str:
        return f"{{Square {super().__str__()}}}"