from unittest.mock import MagicMock

import pytest

from playground.errors import ErrorKind, OperationFailure
from playground.single_responsibility import (
    Database,
    ErrorLogger,
    FileSystem,
    Post,
    PostHandler,
    User,
)
from playground.single_responsibility import refactor


def test_post_handler_stores_post_without_logging():
    database = Database()
    error_logger = MagicMock(spec=ErrorLogger)
    handler = PostHandler(database, error_logger)
    assert handler.create_post("hello") is True
    assert database.posts == ["hello"]
    error_logger.log.assert_not_called()


def test_failing_database_logs_exactly_once_and_does_not_raise():
    database = Database(available=False)
    error_logger = MagicMock(spec=ErrorLogger)
    handler = PostHandler(database, error_logger)

    assert handler.create_post("lost") is False

    error_logger.log.assert_called_once()
    (error,), _ = error_logger.log.call_args
    assert isinstance(error, OperationFailure)
    assert error.kind is ErrorKind.DATABASE_UNAVAILABLE


def test_error_logger_records_in_database_and_on_disk(tmp_path):
    log_path = tmp_path / "logs" / "errors.log"
    database = Database()
    error_logger = ErrorLogger(database, error_log_path=str(log_path))
    error = OperationFailure(ErrorKind.DATABASE_UNAVAILABLE, "post")
    error_logger.log(error)
    assert database.errors == [error]
    line = log_path.read_text(encoding="utf-8").strip()
    assert "DATABASE_UNAVAILABLE" in line and "post" in line


def test_filesystem_defaults_to_settings_path(isolated_settings):
    path = FileSystem.write_error(ValueError("bad"))
    assert path == isolated_settings.error_log_path
    with open(path, encoding="utf-8") as f:
        assert "ValueError: bad" in f.read()


def test_database_add_post_raises_when_unavailable():
    with pytest.raises(OperationFailure):
        Database(available=False).add_post("x")


def test_refactor_one_post_builds_its_own_database(monkeypatch):
    # Post hard-codes Database(); the only way to exercise failure is to patch the module.
    assert Post().create_post("fine") is True

    monkeypatch.setattr(refactor, "Database", lambda: Database(available=False))
    written = []
    monkeypatch.setattr(refactor.FileSystem, "write_error", staticmethod(lambda e, path=None: written.append(e)))
    assert Post().create_post("lost") is False
    assert len(written) == 1


def test_legacy_user_handles_everything_itself(tmp_path):
    ok = User()
    assert ok.create_post("hello") is True
    assert ok.posts == ["hello"]

    log_path = tmp_path / "user_errors.log"
    broken = User(available=False, error_log_path=str(log_path))
    assert broken.create_post("lost") is False
    assert len(broken.logged_errors) == 1
    assert "lost" in log_path.read_text(encoding="utf-8")


class FlakyDatabase(Database):
    def add_post(self, post: str) -> None:
        raise ConnectionError("connection reset")


def test_foreign_database_error_is_logged_once_and_absorbed():
    error_logger = MagicMock(spec=ErrorLogger)
    handler = PostHandler(FlakyDatabase(), error_logger)

    assert handler.create_post("x") is False

    error_logger.log.assert_called_once()
    (error,), _ = error_logger.log.call_args
    assert isinstance(error, ConnectionError)


def test_legacy_user_absorbs_foreign_errors(tmp_path, monkeypatch):
    user = User(error_log_path=str(tmp_path / "user_errors.log"))

    def broken(post):
        raise ConnectionError("connection reset")

    monkeypatch.setattr(user, "add_post_to_database", broken)
    assert user.create_post("x") is False
    assert len(user.logged_errors) == 1


def test_error_logger_contains_its_own_disk_failure(tmp_path):
    # A directory cannot be opened for append
    database = Database(available=False)
    handler = PostHandler(database, ErrorLogger(database, error_log_path=str(tmp_path)))

    assert handler.create_post("lost") is False
    assert len(database.errors) == 1


def test_refactor_one_post_absorbs_foreign_errors(monkeypatch):
    monkeypatch.setattr(refactor, "Database", FlakyDatabase)
    written = []
    monkeypatch.setattr(refactor.FileSystem, "write_error", staticmethod(lambda e, path=None: written.append(e)))
    assert Post().create_post("x") is False
    assert [type(e) for e in written] == [ConnectionError]
