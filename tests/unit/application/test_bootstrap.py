"""Unit tests for build_request_command."""

from __future__ import annotations

from typing import Callable

import pytest
from structlog.testing import capture_logs

from provisioning_service.application.builders import DataclassObjectBuilder
from provisioning_service.application.commands import RequestCommand, build_request_command
from provisioning_service.application.providers import ProviderRegistry
from provisioning_service.config.settings import CommandSettings
from provisioning_service.config.validation import ConfigError
from provisioning_service.kernel.messaging import Envelope
from provisioning_service.testing import (
    Account,
    AccountQuerySpecification,
    AccountRequisition,
    InMemoryProvider,
    RecordingSyncChannel,
    ScriptedChannelFactory,
)


def _build(settings: CommandSettings, registry: ProviderRegistry, sync: RecordingSyncChannel | None) -> RequestCommand:
    return build_request_command(
        settings,
        registry=registry,
        builder=DataclassObjectBuilder(),
        object_class=Account,
        query_spec_class=AccountQuerySpecification,
        requisition_class=AccountRequisition,
        channel_factory=ScriptedChannelFactory(),
        sync_channel=sync,
    )


class TestBuildRequestCommand:
    def test_pool_follows_settings(self, registry: ProviderRegistry) -> None:
        settings = CommandSettings(
            object_type="Account",
            provider="in-memory",
            pool_name="AccountRequest",
            pool_max_size=7,
            lease_timeout_seconds=2.0,
            request_timeout_ms=1500,
        )
        command = _build(settings, registry, RecordingSyncChannel())
        pool = command.context.pool
        assert pool is not None
        assert (pool.name, pool.max_size, pool.lease_timeout_seconds) == ("AccountRequest", 7, 2.0)
        assert pool.request_timeout_seconds == 1.5
        assert command.object_type == "Account"

    def test_transport_default_timeout(self, registry: ProviderRegistry, settings: CommandSettings) -> None:
        command = _build(settings, registry, None)
        assert command.context.pool is not None
        assert command.context.pool.request_timeout_seconds is None

    def test_provider_is_resolved(self, registry: ProviderRegistry, settings: CommandSettings, provider: InMemoryProvider) -> None:
        assert _build(settings, registry, None).context.provider is provider

    def test_unknown_provider_fails_at_startup(self, registry: ProviderRegistry) -> None:
        with pytest.raises(ConfigError):
            _build(CommandSettings(object_type="Account", provider="nope"), registry, None)

    def test_missing_publisher_logged_once(
        self, registry: ProviderRegistry, settings: CommandSettings, make_envelope: Callable[..., Envelope]
    ) -> None:
        with capture_logs() as logs:
            command = _build(settings, registry, None)
            for _ in range(3):
                command.execute(make_envelope("Create", new_data={"account_id": "1"}))
        warnings = [e for e in logs if e["event"] == "sync_publisher_missing"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert command.context.publisher is None

    def test_publisher_is_built_with_channel(self, registry: ProviderRegistry, settings: CommandSettings) -> None:
        with capture_logs() as logs:
            command = _build(settings, registry, RecordingSyncChannel())
        assert command.context.publisher is not None
        assert not [e for e in logs if e["event"] == "sync_publisher_missing"]

    @pytest.mark.parametrize(
        ("overrides", "expected"),
        [
            ({"service_auth_user_id": "svc@emory.edu/10.0.0.2"}, "svc@emory.edu/10.0.0.2"),
            ({}, "testsuiteapp@emory.edu/127.0.0.1"),
        ],
    )
    def test_baseline_queries_carry_service_identity(
        self,
        make_command: Callable[..., RequestCommand],
        make_envelope: Callable[..., Envelope],
        channel_factory: ScriptedChannelFactory,
        overrides: dict[str, str],
        expected: str,
    ) -> None:
        channel_factory.records.append(Account(account_id="1", account_name="a"))
        command = make_command(pool_name="AccountRequest", **overrides)
        reply = command.execute(
            make_envelope(
                "Update",
                baseline_data={"account_id": "1", "account_name": "a"},
                new_data={"account_id": "1", "account_name": "b"},
            )
        )
        assert reply.is_success
        (request,) = channel_factory.requests
        assert request.auth_user_id == expected
        assert request.action == "Query"

    def test_close_closes_pool(self, registry: ProviderRegistry, settings: CommandSettings) -> None:
        command = _build(settings, registry, None)
        command.close()
        assert command.context.pool is not None
        assert command.context.pool.size == 0
