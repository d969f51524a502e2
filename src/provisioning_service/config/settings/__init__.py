"""Config settings – dataclass settings, loaders and factory."""
from provisioning_service.config.settings.base import Settings
from provisioning_service.config.settings.command import CommandSettings
from provisioning_service.config.settings.factory import SettingsFactory
from provisioning_service.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "CommandSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
