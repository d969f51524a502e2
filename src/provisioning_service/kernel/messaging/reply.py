"""Kernel messaging – reply envelope and error entries."""
from __future__ import annotations

import dataclasses
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Iterable

from provisioning_service.kernel.messaging.envelope import Envelope

if TYPE_CHECKING:
    from provisioning_service.kernel.errors.base import BaseError


class ReplyStatus(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclasses.dataclass(frozen=True)
class ErrorEntry:
    """One entry of a reply's error list."""

    type: str
    code: str
    description: str


@dataclasses.dataclass(frozen=True)
class ReplyEnvelope:
    """Reply sent back for every request.

    The control area of the request (action, object type, sender, message id
    and test id) is echoed; ``data`` holds zero or more objects on success,
    ``errors`` the failure entries otherwise.
    """

    action: str
    object_type: str
    sender_app_id: str
    message_id: str
    test_id: str | None
    status: ReplyStatus
    data: tuple[Any, ...] = ()
    errors: tuple[ErrorEntry, ...] = ()

    @property
    def is_success(self) -> bool:
        return self.status is ReplyStatus.SUCCESS

    @classmethod
    def _echo(cls, request: Envelope, status: ReplyStatus, **kwargs: Any) -> "ReplyEnvelope":
        return cls(
            action=request.action,
            object_type=request.object_type,
            sender_app_id=request.sender_app_id,
            message_id=request.message_id,
            test_id=request.test_id,
            status=status,
            **kwargs,
        )

    @classmethod
    def with_results(cls, request: Envelope, objects: Iterable[Any]) -> "ReplyEnvelope":
        return cls._echo(request, ReplyStatus.SUCCESS, data=tuple(objects))

    @classmethod
    def with_object(cls, request: Envelope, obj: Any) -> "ReplyEnvelope":
        return cls._echo(request, ReplyStatus.SUCCESS, data=(obj,))

    @classmethod
    def with_empty_data_area(cls, request: Envelope) -> "ReplyEnvelope":
        return cls._echo(request, ReplyStatus.SUCCESS)

    @classmethod
    def with_errors(cls, request: Envelope, errors: Iterable["BaseError | ErrorEntry"]) -> "ReplyEnvelope":
        entries = tuple(e if isinstance(e, ErrorEntry) else e.to_error_entry() for e in errors)
        return cls._echo(request, ReplyStatus.FAILURE, errors=entries)


__all__ = ["ErrorEntry", "ReplyEnvelope", "ReplyStatus"]
