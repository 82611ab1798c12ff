"""Single Responsibility page.

A class should not contain multiple reasons to change.
"""

from .legacy import User
from .refactor import Database, ErrorLogger, FileSystem, Post, PostHandler

__all__ = ["User", "Database", "FileSystem", "Post", "ErrorLogger", "PostHandler"]
