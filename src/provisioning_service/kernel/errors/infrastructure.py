"""Infrastructure errors – pooled channels, request/reply exchanges, publication."""

from __future__ import annotations

from typing import Any

from provisioning_service.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a protocol violation."""

    default_code = "InfrastructureError"
    default_type = "system"


class PoolExhaustedError(InfrastructureError):
    """No pooled resource could be leased."""

    default_code = "PoolExhausted"

    def __init__(self, pool: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not lease a resource from pool '{pool}'", **kwargs)
        self.pool = pool


class QueryFailedError(InfrastructureError):
    """A query exchange failed, timed out or was answered with errors."""

    default_code = "QueryFailed"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        timed_out: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Query against '{service}' failed", **kwargs)
        self.service = service
        self.timed_out = timed_out


class RequestFailedError(InfrastructureError):
    """A create/update/delete exchange failed, timed out or was rejected."""

    default_code = "RequestFailed"

    def __init__(
        self,
        service: str,
        operation: str,
        message: str | None = None,
        *,
        timed_out: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"{operation} request against '{service}' failed", **kwargs)
        self.service = service
        self.operation = operation
        self.timed_out = timed_out


class PublishFailedError(InfrastructureError):
    """A sync notification could not be handed to the transport."""

    default_code = "PublishFailed"

    def __init__(self, event: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Failed to publish {event} message", **kwargs)
        self.event = event


__all__ = [
    "InfrastructureError",
    "PoolExhaustedError",
    "PublishFailedError",
    "QueryFailedError",
    "RequestFailedError",
]
