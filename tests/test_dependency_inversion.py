import pytest

from playground.constants import HOURS_PER_YEAR, ONE_YEAR_BACK, SECONDS_PER_HOUR
from playground.dependency_inversion import (
    DeLorean,
    EmmettBrown,
    FilesystemManager,
    Handler,
    MemoryMock,
    Storage,
    TimeTraveling,
)


def test_handler_writes_through_memory_storage():
    storage = MemoryMock()
    Handler(storage).handle("first")
    Handler(storage).handle("second")
    assert storage.entries == ["first", "second"]


def test_handler_writes_through_filesystem_storage(tmp_path):
    storage = FilesystemManager(str(tmp_path / "out" / "storage.log"))
    handler = Handler(storage)
    handler.handle("on disk")
    assert storage.read_lines() == ["on disk"]


def test_filesystem_defaults_to_settings_path(isolated_settings):
    storage = FilesystemManager()
    assert storage.path == isolated_settings.storage_path
    assert storage.read_lines() == []


@pytest.mark.parametrize("storage_factory", [MemoryMock, lambda: FilesystemManager()])
def test_storages_are_substitutable(storage_factory):
    storage = storage_factory()
    assert isinstance(storage, Storage)
    handler = Handler(storage)
    assert handler.handle("payload") is None
    assert handler.storage is storage


def test_storage_errors_propagate_through_handler():
    class Full:
        def write(self, data):
            raise OSError("disk full")

    with pytest.raises(OSError):
        Handler(Full()).handle("x")


def test_delorean_travels_one_year_back():
    assert ONE_YEAR_BACK == -SECONDS_PER_HOUR * HOURS_PER_YEAR
    description = EmmettBrown(DeLorean()).travel_in_time(-3600 * 8760)
    assert "-31536000" in description
    assert description == "Used Flux Capacitor and travelled in time by: -31536000.0s"


def test_time_travel_is_idempotent():
    mastermind = EmmettBrown(DeLorean())
    assert mastermind.travel_in_time(42) == mastermind.travel_in_time(42)


def test_emmett_brown_only_needs_the_capability():
    class Phonebooth:
        def travel_in_time(self, time):
            return f"Excellent! {time}"

    assert isinstance(Phonebooth(), TimeTraveling)
    assert EmmettBrown(Phonebooth()).travel_in_time(1) == "Excellent! 1"
