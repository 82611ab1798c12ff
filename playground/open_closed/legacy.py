"""Open-Closed violation.

Every shape has its own, differently named draw method, so `Drawer` has
to know each concrete type. Adding a triangle means editing `Drawer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import pygame

from playground.constants import SHAPE_LINE_WIDTH, SHAPE_SCALE
from playground.logger import get_logger
from playground.settings import settings

from .shape_type import ShapeType

log = get_logger("ocp.legacy")


@dataclass(frozen=True)
class Circle:
    shape_type: ShapeType
    radius: float
    center: Tuple[float, float]

    def draw_circle(self, surface: pygame.Surface) -> pygame.Rect:
        log.info("draw the circle")
        return pygame.draw.circle(
            surface, settings.shape_color, self.center, self.radius * SHAPE_SCALE, SHAPE_LINE_WIDTH
        )


@dataclass(frozen=True)
class Square:
    shape_type: ShapeType
    side: float
    top_left: Tuple[float, float]

    def draw_square(self, surface: pygame.Surface) -> pygame.Rect:
        log.info("draw the square")
        size = self.side * SHAPE_SCALE
        rect = pygame.Rect(int(self.top_left[0]), int(self.top_left[1]), int(size), int(size))
        return pygame.draw.rect(surface, settings.shape_color, rect, SHAPE_LINE_WIDTH)


class Drawer:
    def draw_all_shapes(self, surface: pygame.Surface) -> List[pygame.Rect]:
        circle = Circle(ShapeType.CIRCLE, 1.0, (0, 0))
        square = Square(ShapeType.SQUARE, 2.0, (0, 0))
        return [circle.draw_circle(surface), square.draw_square(surface)]
