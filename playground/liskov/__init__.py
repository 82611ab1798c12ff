"""Liskov substitution page: the broken hierarchy and its flat refactor."""

from playground.registry import register_capability, register_provider

from . import legacy
from .refactor import Polygon, Rectangle, Square, print_area

register_capability("polygon", Polygon)
register_provider("polygon", "rectangle", Rectangle)
register_provider("polygon", "square", Square)

__all__ = ["legacy", "Polygon", "Rectangle", "Square", "print_area"]
