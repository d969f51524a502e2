"""Application commands – CommandContext."""
from __future__ import annotations

import dataclasses
from typing import Any

from provisioning_service.application.baseline import BaselineConflictChecker
from provisioning_service.application.builders import ObjectBuilder
from provisioning_service.application.providers import Provider
from provisioning_service.application.sync import PublishFailurePolicy, SyncPublisher
from provisioning_service.config.settings import CommandSettings
from provisioning_service.kernel.ddd import QuerySpecification, Record
from provisioning_service.resilience.pool import ResourceLeasePool


@dataclasses.dataclass
class CommandContext:
    """Everything one request command needs, wired once at startup."""

    object_type: str
    provider: Provider
    builder: ObjectBuilder
    object_class: type[Record]
    requisition_class: type[Any]
    query_spec_class: type[QuerySpecification]
    checker: BaselineConflictChecker
    settings: CommandSettings
    logger: Any
    publisher: SyncPublisher | None = None
    pool: ResourceLeasePool | None = None

    @property
    def publish_failure_policy(self) -> PublishFailurePolicy:
        return PublishFailurePolicy(self.settings.publish_failure_policy)


__all__ = ["CommandContext"]
