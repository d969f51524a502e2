"""Application – request/reply client, baseline check, providers and commands."""

from provisioning_service.application.baseline import (
    BaselineCheck,
    BaselineConflictChecker,
    BaselineOutcome,
)
from provisioning_service.application.builders import DataclassObjectBuilder, ObjectBuilder
from provisioning_service.application.commands import (
    CommandContext,
    CommandWorkerPool,
    RequestCommand,
    SyncCommand,
    SyncHandler,
    build_request_command,
)
from provisioning_service.application.providers import Provider, ProviderRegistry
from provisioning_service.application.requests import ExchangeResult, RequestReplyClient
from provisioning_service.application.sync import PublishFailurePolicy, SyncPublisher

__all__ = [
    "BaselineCheck",
    "BaselineConflictChecker",
    "BaselineOutcome",
    "CommandContext",
    "CommandWorkerPool",
    "DataclassObjectBuilder",
    "ExchangeResult",
    "ObjectBuilder",
    "Provider",
    "ProviderRegistry",
    "PublishFailurePolicy",
    "RequestCommand",
    "RequestReplyClient",
    "SyncCommand",
    "SyncHandler",
    "SyncPublisher",
    "build_request_command",
]
