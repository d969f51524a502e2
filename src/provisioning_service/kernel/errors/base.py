"""Root error class for the provisioning-service error hierarchy."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from provisioning_service.kernel.messaging.reply import ErrorEntry

type ErrorType = Literal["application", "system"]


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error maps onto one reply error entry: ``error_type`` tells the
    client whether the request or the backing system is at fault, ``code`` is
    the stable machine-readable identifier and ``message`` the description.

    Args:
        message: Human-readable description.
        code: Stable error code (defaults to ``default_code``).
        error_type: ``"application"`` or ``"system"`` (defaults to ``default_type``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "BaseError"
    default_type: ErrorType = "application"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        error_type: ErrorType | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.error_type: ErrorType = error_type or self.default_type
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "type": self.error_type,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def to_error_entry(self) -> "ErrorEntry":
        """Return the reply error entry describing this failure."""
        from provisioning_service.kernel.messaging.reply import ErrorEntry

        return ErrorEntry(type=self.error_type, code=self.code, description=self.message)


__all__ = ["BaseError", "ErrorType"]
