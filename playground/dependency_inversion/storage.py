"""Handler depends on the Storage abstraction, not on a concrete store.

The most flexible systems are those in which source code dependencies
refer only to abstractions. `FilesystemManager` is the volatile concrete
piece; `MemoryMock` swaps in for it in tests without touching `Handler`.
"""

from __future__ import annotations

import os
from typing import List, Optional, Protocol, runtime_checkable

from playground.logger import get_logger
from playground.settings import settings

log = get_logger("dip.storage")


@runtime_checkable
class Storage(Protocol):
    def write(self, data: str) -> None: ...


class FilesystemManager:
    """Appends each handled string as one line of a text file."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or settings.storage_path

    def write(self, data: str) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"{data}\n")
        log.debug(f"Wrote {len(data)} chars to {self.path}")

    def read_lines(self) -> List[str]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read().splitlines()


class MemoryMock:
    def __init__(self) -> None:
        self.entries: List[str] = []

    def write(self, data: str) -> None:
        self.entries.append(data)


class Handler:
    def __init__(self, storage: Storage):
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def handle(self, string: str) -> None:
        self._storage.write(string)
