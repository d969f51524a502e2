"""Application-layer errors – provider and command failures."""

from __future__ import annotations

from typing import Any

from provisioning_service.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "ApplicationError"


class ProviderError(ApplicationError):
    """A provider failed to query, generate or mutate an object.

    Providers pick the ``code`` and ``error_type``; both travel unchanged into
    the error reply.
    """

    default_code = "ProviderError"


class UnsupportedProviderOperationError(ProviderError):
    """The provider does not implement the requested operation."""

    default_code = "UnsupportedProviderOperation"

    def __init__(self, provider: str, operation: str, **kwargs: Any) -> None:
        super().__init__(f"{provider} does not support the '{operation}' operation", **kwargs)
        self.provider = provider
        self.operation = operation


class CommandError(ApplicationError):
    """Command-level failure escalated to the transport instead of replied.

    Raised when a mutation has already been committed and a later step
    (typically sync publication) failed.
    """

    default_code = "CommandFailed"
    default_type = "system"


__all__ = [
    "ApplicationError",
    "CommandError",
    "ProviderError",
    "UnsupportedProviderOperationError",
]
