"""Liskov substitution violation, kept on purpose.

Objects of a superclass should be replaceable with objects of a subclass
without breaking the program. `Square` is a `Rectangle` by inheritance,
but setting its width silently changes its length and its area is
computed differently, so `Printer` gets a different answer for the same
calls. Do not "fix" this module; `refactor.py` is the fix.
"""

from __future__ import annotations

from typing import List

from playground.logger import get_logger

log = get_logger("lsp.legacy")


class Rectangle:
    def __init__(self) -> None:
        self.width: float = 0.0
        self.length: float = 0.0

    @property
    def area(self) -> float:
        return self.width * self.length


class Square(Rectangle):
    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self.length = value

    @property
    def area(self) -> float:
        return self.width * 10


class Printer:
    def _print_area(self, rectangle: Rectangle) -> float:
        log.info(rectangle.area)
        return rectangle.area

    def print_areas(self) -> List[float]:
        rectangle = Rectangle()
        rectangle.length = 5.0
        rectangle.width = 2.0

        square = Square()
        square.length = 5.0
        square.width = 2.0
        return [self._print_area(rectangle), self._print_area(square)]
