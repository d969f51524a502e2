"""Application sync – SyncPublisher, PublishFailurePolicy."""
from __future__ import annotations

from enum import StrEnum
from typing import Any

from provisioning_service.kernel.ddd import Record
from provisioning_service.kernel.errors import PublishFailedError
from provisioning_service.kernel.messaging import SyncChannel, SyncEventKind, SyncMessage
from provisioning_service.observability.logging import get_logger


class PublishFailurePolicy(StrEnum):
    """What a request command does when publishing fails after a committed mutation.

    ``escalate`` raises a command-level failure to the transport;
    ``reply_with_error`` answers the client with a ``PublishFailed`` error
    stating the mutation was committed.
    """

    ESCALATE = "escalate"
    REPLY_WITH_ERROR = "reply_with_error"


class SyncPublisher:
    """Publish Create/Update/Delete-Sync messages after successful mutations."""

    def __init__(self, channel: SyncChannel, *, source_app_id: str = "", logger: Any = None) -> None:
        self._channel = channel
        self._source_app_id = source_app_id
        self._log = logger or get_logger(__name__)

    def publish(
        self,
        kind: SyncEventKind,
        obj: Record,
        *,
        auth_user_id: str | None = None,
        test_id: str | None = None,
    ) -> SyncMessage:
        message = SyncMessage(
            kind=kind,
            object_type=obj.object_type(),
            data=obj,
            baseline=obj.baseline if kind is SyncEventKind.UPDATE else None,
            auth_user_id=auth_user_id,
            sender_app_id=self._source_app_id,
            test_id=test_id if test_id is not None else obj.test_id,
        )
        event = f"{message.object_type}.{kind.value}-Sync"
        self._log.info("publishing_sync", sync_event=event, sync_message_id=message.message_id)
        try:
            self._channel.publish(message)
        except Exception as exc:
            self._log.error("sync_publish_failed", sync_event=event, error=str(exc))
            raise PublishFailedError(
                event,
                f"An error occurred publishing the {event} message. The exception is: {exc}",
                cause=exc,
            ) from exc
        self._log.info("published_sync", sync_event=event)
        return message

    def publish_create(self, obj: Record, **kwargs: Any) -> SyncMessage:
        return self.publish(SyncEventKind.CREATE, obj, **kwargs)

    def publish_update(self, obj: Record, **kwargs: Any) -> SyncMessage:
        return self.publish(SyncEventKind.UPDATE, obj, **kwargs)

    def publish_delete(self, obj: Record, **kwargs: Any) -> SyncMessage:
        return self.publish(SyncEventKind.DELETE, obj, **kwargs)


__all__ = ["PublishFailurePolicy", "SyncPublisher"]
