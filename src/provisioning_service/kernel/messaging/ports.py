"""Kernel messaging – transport ports and sync messages."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any
from uuid import uuid4

from provisioning_service.kernel.messaging.envelope import Envelope
from provisioning_service.kernel.messaging.reply import ReplyEnvelope


class RequestChannel(abc.ABC):
    """Port: point-to-point channel that performs one request/reply exchange.

    Implementations block until the correlated reply arrives.  Exceeding
    *timeout_seconds* raises :class:`TimeoutError`; other transport failures
    raise any exception.
    """

    @abc.abstractmethod
    def request(self, envelope: Envelope, *, timeout_seconds: float | None = None) -> ReplyEnvelope: ...

    def close(self) -> None:
        """Release transport resources; called when the pool shuts down."""


class ChannelFactory(abc.ABC):
    """Port: open new request channels for a :class:`ResourceLeasePool`."""

    @abc.abstractmethod
    def open(self) -> RequestChannel: ...


class SyncEventKind(StrEnum):
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


@dataclasses.dataclass(frozen=True)
class SyncMessage:
    """Create/Update/Delete-Sync notification.

    Outbound messages carry built objects; inbound ones may carry raw
    fragments that the consuming command builds itself.
    """

    kind: SyncEventKind
    object_type: str
    data: Any = None
    baseline: Any = None
    auth_user_id: str | None = None
    sender_app_id: str = ""
    test_id: str | None = None
    message_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))


class SyncChannel(abc.ABC):
    """Port: publish/subscribe channel for sync messages."""

    @abc.abstractmethod
    def publish(self, message: SyncMessage) -> None: ...


__all__ = [
    "ChannelFactory",
    "RequestChannel",
    "SyncChannel",
    "SyncEventKind",
    "SyncMessage",
]
