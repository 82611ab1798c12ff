"""Open-Closed refactors.

Modules that conform to the principle are open for extension (new
behavior can be added) and closed for modification (their source does
not change to get it).

`Drawer` and `WeaponsComposite` only know the `Shape` and `Shooting`
protocols. A new shape or weapon is a new class, nothing else changes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Tuple, runtime_checkable

import pygame

from playground.composite import Composite
from playground.constants import SHAPE_LINE_WIDTH, SHAPE_SCALE
from playground.logger import get_logger
from playground.settings import settings

from .shape_type import ShapeType

log = get_logger("ocp")


@runtime_checkable
class Shape(Protocol):
    def draw(self, surface: pygame.Surface) -> pygame.Rect: ...


@dataclass(frozen=True)
class Circle:
    radius: float
    center: Tuple[float, float] = (0, 0)
    shape_type: ShapeType = ShapeType.CIRCLE

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        log.info("draw the circle - Refactor 1")
        return pygame.draw.circle(
            surface, settings.shape_color, self.center, self.radius * SHAPE_SCALE, SHAPE_LINE_WIDTH
        )


@dataclass(frozen=True)
class Square:
    side: float
    top_left: Tuple[float, float] = (0, 0)
    shape_type: ShapeType = ShapeType.SQUARE

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        log.info("draw the square - Refactor 1")
        size = self.side * SHAPE_SCALE
        rect = pygame.Rect(int(self.top_left[0]), int(self.top_left[1]), int(size), int(size))
        return pygame.draw.rect(surface, settings.shape_color, rect, SHAPE_LINE_WIDTH)


@dataclass(frozen=True)
class Triangle:
    """Equilateral triangle whose bounding box starts at `top_left`."""

    side: float
    top_left: Tuple[float, float] = (0, 0)
    shape_type: ShapeType = ShapeType.TRIANGLE

    def vertices(self) -> List[Tuple[float, float]]:
        x, y = self.top_left
        side = self.side * SHAPE_SCALE
        height = side * math.sqrt(3) / 2
        return [(x + side / 2, y), (x + side, y + height), (x, y + height)]

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        log.info("draw the triangle - Refactor 1")
        return pygame.draw.polygon(surface, settings.shape_color, self.vertices(), SHAPE_LINE_WIDTH)


class Drawer:
    def draw_shapes(self, shapes: Sequence[Shape], surface: pygame.Surface) -> List[pygame.Rect]:
        return Composite(shapes).map(lambda shape: shape.draw(surface))


# Example 2 --------------------------------------------------------------
@runtime_checkable
class Shooting(Protocol):
    def shoot(self) -> str: ...


# I'm a laser beam. I can shoot.
class LaserBeam:
    def shoot(self) -> str:
        return "Ziiiiiip!"


class RocketLauncher:
    def shoot(self) -> str:
        return "Whoosh!"


class WeaponsComposite(Composite[Shooting]):
    """Fires every held weapon at once, results in weapon order."""

    def __init__(self, weapons: Iterable[Shooting] = ()):
        super().__init__(weapons)

    @property
    def weapons(self) -> Tuple[Shooting, ...]:
        return self.providers

    def shoot(self) -> List[str]:
        return self.map(lambda weapon: weapon.shoot())
