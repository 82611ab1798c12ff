"""Error kinds raised by providers and the registry.

Each ErrorKind carries its own description so callers (and the error
loggers on the Single Responsibility page) can render a failure without
knowing which provider raised it.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    SOMETHING_WENT_WRONG = "Something went wrong"
    DATABASE_UNAVAILABLE = "The database is unavailable"
    UNKNOWN_PROVIDER = "No provider registered under that name"
    PROVIDER_MISMATCH = "Provider does not satisfy the capability contract"
    UNSUPPORTED_STYLE = "Log style not supported by this logger"

    @property
    def description(self) -> str:
        return self.value


class PlaygroundError(Exception):
    """Base error; `kind` tags the failure, `detail` adds context."""

    def __init__(self, kind: ErrorKind = ErrorKind.SOMETHING_WENT_WRONG, detail: str | None = None):
        self.kind = kind
        self.detail = detail
        super().__init__(self.description)

    @property
    def description(self) -> str:
        if self.detail:
            return f"{self.kind.description}: {self.detail}"
        return self.kind.description

    def __str__(self) -> str:
        return self.description


class OperationFailure(PlaygroundError):
    """A provider could not complete an operation (e.g. a database write)."""


class UnknownProviderError(PlaygroundError, KeyError):
    def __init__(self, detail: str | None = None):
        super().__init__(ErrorKind.UNKNOWN_PROVIDER, detail)


class ProviderMismatchError(PlaygroundError, TypeError):
    def __init__(self, detail: str | None = None):
        super().__init__(ErrorKind.PROVIDER_MISMATCH, detail)


class UnsupportedStyleError(PlaygroundError, NotImplementedError):
    """Raised by loggers forced to carry a style method they do not support."""

    def __init__(self, detail: str | None = None):
        super().__init__(ErrorKind.UNSUPPORTED_STYLE, detail)


__all__ = [
    "ErrorKind",
    "PlaygroundError",
    "OperationFailure",
    "UnknownProviderError",
    "ProviderMismatchError",
    "UnsupportedStyleError",
]
