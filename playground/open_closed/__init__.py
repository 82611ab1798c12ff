"""Open-Closed page.

Registers the refactored shapes and weapons as providers on import.
"""

from playground.registry import register_capability, register_provider

from . import legacy
from .refactor import (
    Circle,
    Drawer,
    LaserBeam,
    RocketLauncher,
    Shape,
    Shooting,
    Square,
    Triangle,
    WeaponsComposite,
)
from .shape_type import ShapeType

register_capability("shape", Shape)
register_provider("shape", "circle", Circle)
register_provider("shape", "square", Square)
register_provider("shape", "triangle", Triangle)

register_capability("weapon", Shooting)
register_provider("weapon", "laser", LaserBeam)
register_provider("weapon", "rocket", RocketLauncher)

__all__ = [
    "legacy",
    "ShapeType",
    "Shape",
    "Circle",
    "Square",
    "Triangle",
    "Drawer",
    "Shooting",
    "LaserBeam",
    "RocketLauncher",
    "WeaponsComposite",
]
