"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from provisioning_service.config.settings.base import Settings
from provisioning_service.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _env_key(settings_class: type[Settings], field_name: str) -> str:
    prefix = getattr(settings_class, "_prefix", "").upper()
    return f"{prefix}_{field_name}".upper().lstrip("_")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        """Return only the values this source supplies, without constructing."""
        instance = self.load(settings_class)
        return {f.name: getattr(instance, f.name) for f in dataclasses.fields(instance)}  # type: ignore[arg-type]


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables (``<PREFIX>_<FIELD>``)."""

    def load(self, settings_class: type[T]) -> T:
        kwargs = self.load_values(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name in kwargs:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(_env_key(settings_class, field.name))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = _env_key(settings_class, field.name)
            raw = os.environ.get(env_key)
            if raw is not None:
                values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def _coerce(self, name: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
        hint = hint.replace(" ", "").removesuffix("|None")
        try:
            if hint == "bool":
                lowered = value.strip().lower()
                if lowered not in _TRUE + _FALSE:
                    raise ValueError("expected a boolean")
                return lowered in _TRUE
            if hint == "int":
                return int(value)
            if hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, str(exc)) from exc
        if hint.startswith(("list", "tuple")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)

    def load_values(self, settings_class: type[T]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load_values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
