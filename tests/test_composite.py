import pytest

from playground.composite import Composite


class Echo:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def run(self):
        self.calls += 1
        return self.value


def test_map_preserves_order_and_matches_isolated_results():
    providers = [Echo(v) for v in ("a", "b", "c", "b")]
    isolated = [p.run() for p in providers]
    assert Composite(providers).map(lambda p: p.run()) == isolated


def test_each_provider_called_once_per_map():
    providers = [Echo(1), Echo(2)]
    Composite(providers).map(lambda p: p.run())
    assert [p.calls for p in providers] == [1, 1]


def test_empty_composite_maps_to_empty_list():
    assert Composite([]).map(lambda p: p.run()) == []
    assert Composite().map(lambda p: p.run()) == []


def test_with_provider_returns_new_composite():
    first = Composite([Echo(1)])
    second = first.with_provider(Echo(2))
    assert len(first) == 1
    assert second.map(lambda p: p.run()) == [1, 2]


def test_source_sequence_changes_do_not_leak_in():
    providers = [Echo(1)]
    composite = Composite(providers)
    providers.append(Echo(2))
    assert composite.map(lambda p: p.run()) == [1]


def test_provider_errors_propagate():
    class Broken:
        def run(self):
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        Composite([Echo(1), Broken()]).map(lambda p: p.run())
