"""Shared fixtures for the provisioning-service unit tests."""
from __future__ import annotations

from typing import Any, Callable

import pytest

from provisioning_service.application.builders import DataclassObjectBuilder
from provisioning_service.application.commands import RequestCommand, build_request_command
from provisioning_service.application.providers import ProviderRegistry
from provisioning_service.config.settings import CommandSettings
from provisioning_service.kernel.messaging import DataArea, Envelope
from provisioning_service.testing import (
    Account,
    AccountQuerySpecification,
    AccountRequisition,
    InMemoryProvider,
    RecordingSyncChannel,
    ScriptedChannelFactory,
    account_from_requisition,
)

VALID_AUTH = "jdoe@emory.edu/10.0.0.1"


@pytest.fixture
def settings() -> CommandSettings:
    return CommandSettings(object_type="Account", provider="in-memory", lease_timeout_seconds=1.0)


@pytest.fixture
def provider() -> InMemoryProvider:
    return InMemoryProvider(generator=account_from_requisition)


@pytest.fixture
def sync_channel() -> RecordingSyncChannel:
    return RecordingSyncChannel()


@pytest.fixture
def channel_factory() -> ScriptedChannelFactory:
    return ScriptedChannelFactory()


@pytest.fixture
def registry(provider: InMemoryProvider) -> ProviderRegistry:
    reg = ProviderRegistry()
    reg.register("in-memory", lambda _settings: provider)
    return reg


@pytest.fixture
def make_command(
    settings: CommandSettings,
    registry: ProviderRegistry,
    channel_factory: ScriptedChannelFactory,
    sync_channel: RecordingSyncChannel,
) -> Callable[..., RequestCommand]:
    """Build a request command; keyword arguments override settings fields."""

    def factory(*, with_sync: bool = True, **overrides: Any) -> RequestCommand:
        values = {
            "object_type": settings.object_type,
            "provider": settings.provider,
            "lease_timeout_seconds": settings.lease_timeout_seconds,
        }
        values.update(overrides)
        return build_request_command(
            CommandSettings(**values),
            registry=registry,
            builder=DataclassObjectBuilder(),
            object_class=Account,
            query_spec_class=AccountQuerySpecification,
            requisition_class=AccountRequisition,
            channel_factory=channel_factory,
            sync_channel=sync_channel if with_sync else None,
        )

    return factory


@pytest.fixture
def make_envelope() -> Callable[..., Envelope]:
    """Build a request envelope for the Account object."""

    def factory(action: str, *, object_type: str = "Account", auth_user_id: str = VALID_AUTH, **payload: Any) -> Envelope:
        return Envelope(
            action=action,
            object_type=object_type,
            auth_user_id=auth_user_id,
            sender_app_id="test-app",
            payload=DataArea(**payload),
            test_id="series-1",
        )

    return factory
