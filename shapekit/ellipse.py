"""Ellipses and circles."""

from __future__ import annotations

import math

from .shape import PI, Shape, _format_number


class Ellipse(Shape):
    """An ellipse given by its semi-major and semi-minor axis lengths."""

    def __init__(self, radius_a: float, radius_b: float) -> None:
        self.radius_a = radius_a
        self.radius_b = radius_b

    def __str__(self) -> str:
        return (
            f"{{Ellipse {super().__str__()}, "
            f"a: {_format_number(self.radius_a)}, "
            f"b: {_format_number(self.radius_b)}}}"
        )

    def area(self) -> float:
        return PI * self.radius_a * self.radius_b

    def perimeter(self) -> float:
        """Approximate the perimeter with Ramanujan's second formula."""
        a, b = self.radius_a, self.radius_b
        h = (a - b) ** 2 / (a + b) ** 2
        return PI * (a + b) * (1 + (3 * h) / (10 + math.sqrt(4 - 3 * h)))

    def eccentricity(self) -> float:
        """Return the eccentricity; NaN when the minor axis exceeds the major."""
        squared = self.radius_a**2 - self.radius_b**2
        if squared < 0:
            return math.nan
        return math.sqrt(squared) / self.radius_a


class Circle(Ellipse):
    """A circle: an ellipse whose two axes are equal."""

    def __init__(self, radius: float) -> None:
        super().__init__(radius, radius)

    def __str__(self) -> str:
        return f"{{Circle {super().__str__()}}}"

    def perimeter(self) -> float:
        return 2 * PI * self.radius_a