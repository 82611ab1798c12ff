"""Composition over inheritance.

Rectangle and Square share the `Polygon` capability and nothing else.
Neither can be mutated after construction, so no caller can observe one
breaking the other's invariants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from playground.logger import get_logger

log = get_logger("lsp")


@runtime_checkable
class Polygon(Protocol):
    @property
    def area(self) -> float: ...


@dataclass(frozen=True)
class Rectangle:
    width: float
    length: float

    @property
    def area(self) -> float:
        return float(self.width * self.length)


@dataclass(frozen=True)
class Square:
    side: float

    @property
    def area(self) -> float:
        return float(self.side**2)


def print_area(polygon: Polygon) -> float:
    log.info(f"{polygon.area}Refactor")
    return polygon.area
