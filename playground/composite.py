from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Composite(Generic[T]):
    """Ordered, immutable group of providers sharing one capability.

    `map` calls the operation on every provider in insertion order and
    returns the results in that same order. An empty composite maps to an
    empty list. Provider errors propagate unchanged.
    """

    def __init__(self, providers: Iterable[T] = ()):
        self._providers: Tuple[T, ...] = tuple(providers)

    @property
    def providers(self) -> Tuple[T, ...]:
        return self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[T]:
        return iter(self._providers)

    def map(self, operation: Callable[[T], R]) -> List[R]:
        return [operation(provider) for provider in self._providers]

    def with_provider(self, provider: T) -> "Composite[T]":
        """Return a new composite with `provider` appended; self is unchanged."""
        return type(self)(self._providers + (provider,))
