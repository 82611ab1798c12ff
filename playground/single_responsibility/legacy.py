"""A class should not contain multiple reasons to change.

`User` below has three: storing posts, recording errors in the database
and writing errors to disk. Any change to one of those concerns means
editing (and retesting) this class.
"""

from __future__ import annotations

import os
import time
from typing import List

from playground.errors import ErrorKind, OperationFailure
from playground.logger import get_logger
from playground.settings import settings

log = get_logger("srp.legacy")


class User:
    def __init__(self, available: bool = True, error_log_path: str | None = None):
        self.available = available
        self.error_log_path = error_log_path
        self.posts: List[str] = []
        self.logged_errors: List[Exception] = []

    def create_post(self, post: str) -> bool:
        try:
            self.add_post_to_database(post)
        except Exception as e:
            self.log_error_to_database(e)
            self.write_log_error_on_disk(e)
            return False
        return True

    def add_post_to_database(self, post: str) -> None:
        if not self.available:
            raise OperationFailure(ErrorKind.DATABASE_UNAVAILABLE, post)
        self.posts.append(post)

    def log_error_to_database(self, error: Exception) -> None:
        self.logged_errors.append(error)

    def write_log_error_on_disk(self, error: Exception) -> None:
        path = self.error_log_path or settings.error_log_path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{time.strftime('%Y-%m-%dT%H:%M:%S')} {error}\n")
        log.warn("User wrote error to disk:", error)
