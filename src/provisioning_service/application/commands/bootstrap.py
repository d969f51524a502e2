"""Application commands – build_request_command composition root."""
from __future__ import annotations

from typing import Any

from provisioning_service.application.baseline import BaselineConflictChecker
from provisioning_service.application.builders import ObjectBuilder
from provisioning_service.application.commands.context import CommandContext
from provisioning_service.application.commands.dispatcher import RequestCommand
from provisioning_service.application.providers import ProviderRegistry
from provisioning_service.application.requests import RequestReplyClient
from provisioning_service.application.sync import SyncPublisher
from provisioning_service.config.settings import CommandSettings
from provisioning_service.kernel.ddd import QuerySpecification, Record
from provisioning_service.kernel.messaging import ChannelFactory, SyncChannel
from provisioning_service.observability.logging import get_logger
from provisioning_service.resilience.pool import ResourceLeasePool


def build_request_command(
    settings: CommandSettings,
    *,
    registry: ProviderRegistry,
    builder: ObjectBuilder,
    object_class: type[Record],
    query_spec_class: type[QuerySpecification],
    requisition_class: type[Any],
    channel_factory: ChannelFactory,
    sync_channel: SyncChannel | None = None,
    logger: Any = None,
) -> RequestCommand:
    """Wire a :class:`RequestCommand` from *settings*.

    The provider is resolved from *registry* by ``settings.provider``; an
    unknown name raises ``ConfigError`` here rather than on the first request.
    Without a *sync_channel* the command runs without publishing, which is
    logged once at this point.
    """
    log = logger or get_logger("provisioning_service.command", object_type=settings.object_type)
    provider = registry.resolve(settings.provider, settings)

    pool = ResourceLeasePool(
        settings.pool_name,
        channel_factory,
        max_size=settings.pool_max_size,
        lease_timeout_seconds=settings.lease_timeout_seconds,
        request_timeout_seconds=settings.request_timeout_seconds,
    )
    client = RequestReplyClient(
        pool,
        service_name=settings.pool_name,
        auth_user_id=settings.query_auth_user_id,
        sender_app_id=settings.source_app_id,
    )
    checker = BaselineConflictChecker(client, query_spec_class)

    publisher: SyncPublisher | None = None
    if sync_channel is None:
        log.warning(
            "sync_publisher_missing",
            detail="Processing will continue but sync messages will not be published "
            "when changes are made via this command.",
        )
    else:
        publisher = SyncPublisher(sync_channel, source_app_id=settings.source_app_id)

    context = CommandContext(
        object_type=settings.object_type,
        provider=provider,
        builder=builder,
        object_class=object_class,
        requisition_class=requisition_class,
        query_spec_class=query_spec_class,
        checker=checker,
        settings=settings,
        logger=log,
        publisher=publisher,
        pool=pool,
    )
    log.info(
        "command_initialized",
        provider=settings.provider,
        supported_actions=settings.supported_actions,
        pool_max_size=settings.pool_max_size,
    )
    return RequestCommand(context)


__all__ = ["build_request_command"]
