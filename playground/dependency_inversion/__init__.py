"""Dependency Inversion page.

It is the volatile concrete elements of a system that we want to avoid
depending on.
"""

from playground.registry import register_capability, register_provider

from .storage import FilesystemManager, Handler, MemoryMock, Storage
from .time_travel import DeLorean, EmmettBrown, TimeTraveling

register_capability("storage", Storage)
register_provider("storage", "filesystem", FilesystemManager)
register_provider("storage", "memory", MemoryMock)

register_capability("time_machine", TimeTraveling)
register_provider("time_machine", "delorean", DeLorean)

__all__ = [
    "Storage",
    "FilesystemManager",
    "MemoryMock",
    "Handler",
    "TimeTraveling",
    "DeLorean",
    "EmmettBrown",
]
