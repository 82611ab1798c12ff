"""Playground walkthrough harness.

Runs every page in reading order, logging each page's principle and
summary. The Open-Closed drawing is rendered off-screen and saved to
`settings.snapshot_path` so no display is needed.
"""

from __future__ import annotations

import os

import pygame

from playground.logger import get_logger
from playground.pages import PAGES, next_page
from playground.settings import settings

log = get_logger("app")


def save_snapshot(surface: pygame.Surface, path: str) -> str:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    pygame.image.save(surface, path)
    return path


def main():
    results = {}
    for page in PAGES:
        log.info(f"## {page.title}")
        log.info(page.principle)
        summary = page.run()
        surface = summary.pop("surface", None)
        if surface is not None:
            summary["snapshot"] = save_snapshot(surface, settings.snapshot_path)
        for key, value in summary.items():
            log.info(f"{key}: {value}")
        following = next_page(page.slug)
        if following is not None:
            log.debug(f"Next: {following.title}")
        results[page.slug] = summary
    return results


if __name__ == "__main__":
    main()
