"""General and isosceles triangles."""

from __future__ import annotations

import math

from .shape import Shape, _format_number


def find_angle(opposite_length: float, side1: float, side2: float) -> float:
    """Return the angle between two sides by the law of cosines, or NaN if impossible."""
    cosine = (side1**2 + side2**2 - opposite_length**2) / (2 * side1 * side2)
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


class Triangle(Shape):
    """A triangle given by the lengths of its three sides."""

    def __init__(self, a: float, b: float, c: float) -> None:
        if not (a > 0 and b > 0 and c > 0):
            raise ValueError("triangle sides must all be positive")
        self.a = a
        self.b = b
        self.c = c

    def __str__(self) -> str:
        return (
            f"{{Triangle {super().__str__()}"
            f" a = {_format_number(self.a)}"
            f", b = {_format_number(self.b)}"
            f", c = {_format_number(self.c)}}}"
        )

    def area(self) -> float:
        """Heron's formula; NaN when the sides cannot close a triangle."""
        s = (self.a + self.b + self.c) / 2.0
        product = s * (s - self.a) * (s - self.b) * (s - self.c)
        if product < 0:
            return math.nan
        return math.sqrt(product)

    def perimeter(self) -> float:
        return self.a + self.b + self.a

    def hypotenuse(self) -> float:
        """Return the longest side."""
        return max(self.a, self.b, self.c)

    def angle_ab(self) -> float:
        return find_angle(self.c, self.a, self.b)

    def angle_bc(self) -> float:
        return find_angle(self.a, self.b, self.c)

    def angle_ac(self) -> float:
        return find_angle(self.b, self.a, self.c)


class Isosceles(Triangle):
    """A triangle with two sides of equal length."""

    def __init__(self, equal_sides_length: float, other_side_length: float) -> None:
        super().__init__(equal_sides_length, equal_sides_length, other_side_length)

    def __str__(self) -> str:
        return f"{{Isosceles {super().__str__()}}}"