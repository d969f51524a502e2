"""Application providers – ProviderRegistry."""
from __future__ import annotations

from typing import Any, Callable

from provisioning_service.application.providers.provider import Provider
from provisioning_service.config.validation import ConfigError

type ProviderFactory = Callable[[Any], Provider]


class ProviderRegistry:
    """Map provider names to factories, resolved once at startup.

    Example::

        registry = ProviderRegistry()
        registry.register("example-account", lambda settings: ExampleAccountProvider())
        provider = registry.resolve("example-account", settings)
    """

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        if name in self._factories:
            raise ConfigError(f"Provider {name!r} is already registered")
        self._factories[name] = factory

    def resolve(self, name: str, settings: Any = None) -> Provider:
        factory = self._factories.get(name)
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise ConfigError(f"No provider registered under {name!r} (known: {known})")
        try:
            provider = factory(settings)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"An error occurred initializing provider {name!r}: {exc}", cause=exc
            ) from exc
        if not isinstance(provider, Provider):
            raise ConfigError(f"Factory for {name!r} returned {type(provider).__name__}, not a Provider")
        return provider

    def kinds(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


__all__ = ["ProviderFactory", "ProviderRegistry"]
