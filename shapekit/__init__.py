"""Plane shapes with area and perimeter, and an interactive shape menu."""

__version__ = "0.1.0"
__all__ = ["shape", "ellipse", "triangle", "rectangle", "cli"]