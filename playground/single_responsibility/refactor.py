"""Single Responsibility refactors.

Refactor 1 splits storage (`Database`) from disk logging (`FileSystem`),
but `Post` still builds its own database and knows both error sinks.

Refactor 2 moves error recording into `ErrorLogger`, whose only job is
turning a failure into persisted form, and injects both collaborators
into `PostHandler`. The handler calls the logger on the failure path
only, exactly once per failed post, and does not re-raise.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from playground.errors import ErrorKind, OperationFailure
from playground.logger import get_logger
from playground.settings import settings

log = get_logger("srp")


@dataclass
class Database:
    available: bool = True
    posts: List[str] = field(default_factory=list)
    errors: List[Exception] = field(default_factory=list)

    def add_post(self, post: str) -> None:
        if not self.available:
            raise OperationFailure(ErrorKind.DATABASE_UNAVAILABLE, post)
        self.posts.append(post)

    def log_error(self, error: Exception) -> None:
        self.errors.append(error)


class FileSystem:
    @staticmethod
    def write_error(error: Exception, path: Optional[str] = None) -> str:
        """Append one line describing `error` to the error log; returns the path."""
        path = path or settings.error_log_path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        kind = getattr(error, "kind", None)
        tag = kind.name if kind is not None else type(error).__name__
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{time.strftime('%Y-%m-%dT%H:%M:%S')} {tag}: {error}\n")
        return path


# Refactor 1 -------------------------------------------------------------
class Post:
    def create_post(self, post: str) -> bool:
        database = Database()
        try:
            database.add_post(post)
        except Exception as e:
            database.log_error(e)
            FileSystem.write_error(e)
            return False
        return True


# Refactor 2 -------------------------------------------------------------
@dataclass(frozen=True)
class ErrorLogger:
    database: Database
    error_log_path: Optional[str] = None

    def log(self, error: Exception) -> None:
        """Record `error` in the database and on disk.

        A failing disk sink is reported but never raised; the database
        record is already written by then.
        """
        self.database.log_error(error)
        try:
            FileSystem.write_error(error, self.error_log_path)
        except OSError as e:
            log.error("Could not write error log:", e)
            return
        log.warn("Recorded failure:", error)


@dataclass(frozen=True)
class PostHandler:
    database: Database
    error_logger: ErrorLogger

    def create_post(self, post: str) -> bool:
        try:
            self.database.add_post(post)
        except Exception as e:
            self.error_logger.log(e)
            return False
        return True
