"""Domain errors – malformed requests, validation failures, baseline outcomes."""

from __future__ import annotations

from typing import Any

from provisioning_service.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request breaks a protocol rule."""

    default_code = "DomainError"


class MalformedRequestError(DomainError):
    """A required payload element is missing or cannot be built."""

    default_code = "MalformedRequest"

    def __init__(
        self,
        message: str,
        *,
        element: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.element = element


class ValidationError(DomainError):
    """Control-area data does not meet validation rules."""

    default_code = "ValidationFailure"


class UnsupportedMessageObjectError(ValidationError):
    """The envelope names an object type the command does not handle."""

    default_code = "UnsupportedMessageObject"

    def __init__(self, received: str, expected: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported message object: {received}. This command expects '{expected}'.",
            **kwargs,
        )
        self.received = received
        self.expected = expected


class UnsupportedMessageActionError(ValidationError):
    """The envelope action is unknown or not enabled for the command."""

    default_code = "UnsupportedMessageAction"

    def __init__(self, action: str, supported: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported message action: {action}. "
            f"This command only supports {', '.join(supported)}.",
            **kwargs,
        )
        self.action = action
        self.supported = supported


class InvalidAuthUserIdError(ValidationError):
    """The AuthUserId is not of the form ``principal/ipAddress``."""

    default_code = "InvalidAuthUserId"

    def __init__(self, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid AuthUserId. The value '{value}' is not valid ({reason}). "
            "The expected format is user@domain/ip number.",
            **kwargs,
        )
        self.value = value
        self.reason = reason


class BaselineStaleError(DomainError):
    """No current record exists to update against."""

    default_code = "BaselineStale"

    def __init__(self, message: str = "Baseline is stale. No baseline found.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class BaselineConflictError(DomainError):
    """The current record differs from the baseline the client supplied."""

    default_code = "BaselineConflict"

    def __init__(self, message: str = "Baseline is stale.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoOpUpdateError(DomainError):
    """Baseline and new state are equal, so there is nothing to update."""

    default_code = "NoOpRejected"

    def __init__(self, object_type: str = "object", **kwargs: Any) -> None:
        super().__init__(
            f"Baseline state and new state of the {object_type} are equal. "
            "No update operation may be performed.",
            **kwargs,
        )


class AmbiguousBaselineError(DomainError):
    """More than one current record matched the baseline identity."""

    default_code = "AmbiguousBaseline"
    default_type = "system"

    def __init__(self, identity: Any, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"Found {count} records for identity {identity!r} while verifying the baseline; "
            "expected at most one.",
            **kwargs,
        )
        self.identity = identity
        self.count = count


__all__ = [
    "AmbiguousBaselineError",
    "BaselineConflictError",
    "BaselineStaleError",
    "DomainError",
    "InvalidAuthUserIdError",
    "MalformedRequestError",
    "NoOpUpdateError",
    "UnsupportedMessageActionError",
    "UnsupportedMessageObjectError",
    "ValidationError",
]
