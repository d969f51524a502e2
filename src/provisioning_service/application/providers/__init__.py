"""Application providers – provider port and registry."""
from provisioning_service.application.providers.provider import Provider
from provisioning_service.application.providers.registry import ProviderFactory, ProviderRegistry

__all__ = ["Provider", "ProviderFactory", "ProviderRegistry"]
