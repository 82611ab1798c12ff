"""Capability provider registry.

Providers are registered as factories under a capability name
("storage", "weapon", ...) and a provider name ("memory", "laser", ...).
Clients never reach into the registry themselves; a composition root
(the pages, `app.py`, tests) builds providers here and injects them.

A capability may declare a runtime-checkable Protocol as its contract;
`create` then refuses to hand out anything that does not satisfy it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from playground.errors import ProviderMismatchError, UnknownProviderError
from playground.logger import get_logger

log = get_logger("registry")

Factory = Callable[..., Any]


class ProviderRegistry:
    def __init__(self) -> None:
        self._contracts: Dict[str, Optional[type]] = {}
        self._factories: Dict[str, Dict[str, Factory]] = {}

    def register_capability(self, capability: str, contract: Optional[type] = None) -> None:
        self._contracts[capability] = contract
        self._factories.setdefault(capability, {})

    def register(self, capability: str, name: str, factory: Factory) -> None:
        if capability not in self._contracts:
            self.register_capability(capability)
        providers = self._factories[capability]
        if name in providers:
            log.debug(f"Replacing provider {capability}/{name}")
        providers[name] = factory

    def create(self, capability: str, name: str, *args, **kwargs) -> Any:
        if capability not in self._factories:
            raise UnknownProviderError(f"capability '{capability}'")
        factory = self._factories[capability].get(name)
        if factory is None:
            raise UnknownProviderError(f"{capability}/{name}")
        provider = factory(*args, **kwargs)
        contract = self._contracts.get(capability)
        if contract is not None and not isinstance(provider, contract):
            raise ProviderMismatchError(
                f"{type(provider).__name__} registered as {capability}/{name} is not a {contract.__name__}"
            )
        return provider

    def contract(self, capability: str) -> Optional[type]:
        if capability not in self._contracts:
            raise UnknownProviderError(f"capability '{capability}'")
        return self._contracts[capability]

    def names(self, capability: str) -> List[str]:
        return list(self._factories.get(capability, {}))

    def capabilities(self) -> List[str]:
        return list(self._contracts)

    def __contains__(self, key) -> bool:
        capability, name = key
        return name in self._factories.get(capability, {})


_registry = ProviderRegistry()


def register_capability(capability: str, contract: Optional[type] = None) -> None:
    _registry.register_capability(capability, contract)


def register_provider(capability: str, name: str, factory: Factory) -> None:
    _registry.register(capability, name, factory)


def create_provider(capability: str, name: str, *args, **kwargs) -> Any:
    return _registry.create(capability, name, *args, **kwargs)


def list_providers(capability: str) -> List[str]:
    return _registry.names(capability)


def list_capabilities() -> List[str]:
    return _registry.capabilities()


def default_registry() -> ProviderRegistry:
    return _registry


__all__ = [
    "ProviderRegistry",
    "register_capability",
    "register_provider",
    "create_provider",
    "list_providers",
    "list_capabilities",
    "default_registry",
]
