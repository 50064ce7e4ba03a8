"""The abstract base of every shape."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

PI = math.pi


def _format_number(value: float) -> str:
    """Format a number the way a default-precision stream prints a double."""
    return f"{value:g}"


class Shape(ABC):
    """A plane figure with an area and a perimeter."""

    def __str__(self) -> str:
        return "{Shape}"

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""

    @abstractmethod
    def perimeter(self) -> float:
        """Return the perimeter of the shape."""