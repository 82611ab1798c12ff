"""Page catalog for the SOLID playground.

Each page is independent: its `run` builds its own providers, wires them
into clients and returns a summary dict of what happened. Nothing a page
builds is shared with another page. Pages are ordered the way they are
meant to be read; `next_page` / `previous_page` walk that order and
return None at either end.

Usage (see `app.py` for the full walkthrough):

    for page in PAGES:
        summary = page.run()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import pygame

from playground.constants import ONE_YEAR_BACK
from playground.errors import UnsupportedStyleError
from playground.logger import get_logger
from playground.registry import create_provider, list_providers
from playground.settings import settings

from playground import dependency_inversion as dip
from playground import interface_segregation as isp
from playground import liskov as lsp
from playground import open_closed as ocp
from playground import single_responsibility as srp

log = get_logger("pages")


@dataclass(frozen=True)
class Page:
    slug: str
    title: str
    principle: str
    run: Callable[[], Dict[str, Any]]


def run_single_responsibility() -> Dict[str, Any]:
    database = srp.Database()
    handler = srp.PostHandler(database, srp.ErrorLogger(database))
    stored = handler.create_post("Hello, SOLID")

    offline = srp.Database(available=False)
    offline_handler = srp.PostHandler(offline, srp.ErrorLogger(offline))
    failed = not offline_handler.create_post("Lost in transit")
    return {
        "stored": stored,
        "failed": failed,
        "posts": list(database.posts),
        "errors": [str(e) for e in offline.errors],
    }


def run_open_closed() -> Dict[str, Any]:
    surface = pygame.Surface(settings.canvas_size)
    surface.fill(settings.background_color)

    legacy_rects = ocp.legacy.Drawer().draw_all_shapes(surface)

    shapes = [
        create_provider("shape", "circle", 1.0, (60, 120)),
        create_provider("shape", "square", 2.0, (120, 100)),
        create_provider("shape", "triangle", 2.0, (200, 100)),
    ]
    rects = ocp.Drawer().draw_shapes(shapes, surface)

    weapons = ocp.WeaponsComposite([create_provider("weapon", name) for name in list_providers("weapon")])
    shots = weapons.shoot()
    log.info(shots)
    return {"legacy_rects": legacy_rects, "rects": rects, "shots": shots, "surface": surface}


def run_liskov() -> Dict[str, Any]:
    legacy_areas = lsp.legacy.Printer().print_areas()
    areas = [
        lsp.print_area(create_provider("polygon", "rectangle", width=2, length=5)),
        lsp.print_area(create_provider("polygon", "square", side=2)),
    ]
    return {"legacy_areas": legacy_areas, "areas": areas}


def run_interface_segregation() -> Dict[str, Any]:
    lower = create_provider("lower_case", "lower_and_upper")
    upper = create_provider("upper_case", "lower_and_upper")
    styled = [lower.lower_case("Segregated Interfaces"), upper.upper_case("Segregated Interfaces")]

    unsupported = []
    for fat_logger in (isp.legacy.LoggerLowerCase(), isp.legacy.UpperCase()):
        for method in ("lower_case", "upper_case", "capitalized"):
            try:
                getattr(fat_logger, method)("forced")
            except UnsupportedStyleError as e:
                unsupported.append(e.detail)
    return {"styled": styled, "unsupported": unsupported}


def run_dependency_inversion() -> Dict[str, Any]:
    memory = create_provider("storage", "memory")
    dip.Handler(memory).handle("Handled in memory")
    dip.Handler(create_provider("storage", "filesystem")).handle("Handled on disk")

    mastermind = dip.EmmettBrown(create_provider("time_machine", "delorean"))
    travel = mastermind.travel_in_time(ONE_YEAR_BACK)
    log.info(travel)
    return {"memory": list(memory.entries), "storage_path": settings.storage_path, "travel": travel}


PAGES: List[Page] = [
    Page(
        "single-responsibility",
        "Single Responsibility",
        "A class should not contain multiple reasons to change.",
        run_single_responsibility,
    ),
    Page(
        "open-closed",
        "Open-Closed",
        "Modules should be open for extension and closed for modification.",
        run_open_closed,
    ),
    Page(
        "liskov",
        "Liskov Substitution",
        "Objects of a superclass shall be replaceable with objects of its subclasses "
        "without breaking the application.",
        run_liskov,
    ),
    Page(
        "interface-segregation",
        "Interface Segregation",
        "Clients should not be forced to depend on methods that they do not use.",
        run_interface_segregation,
    ),
    Page(
        "dependency-inversion",
        "Dependency Inversion",
        "Source code dependencies should refer only to abstractions, not to concretions.",
        run_dependency_inversion,
    ),
]


def _index(slug: str) -> int:
    for i, page in enumerate(PAGES):
        if page.slug == slug:
            return i
    raise KeyError(f"Unknown page: {slug}")


def get_page(slug: str) -> Page:
    return PAGES[_index(slug)]


def next_page(slug: str) -> Optional[Page]:
    i = _index(slug)
    return PAGES[i + 1] if i + 1 < len(PAGES) else None


def previous_page(slug: str) -> Optional[Page]:
    i = _index(slug)
    return PAGES[i - 1] if i > 0 else None


def list_pages() -> List[str]:
    return [page.slug for page in PAGES]


__all__ = ["Page", "PAGES", "get_page", "next_page", "previous_page", "list_pages"]
