"""Application commands – SyncCommand consumer for inbound sync messages."""
from __future__ import annotations

import abc
import time
from typing import Any, Callable

from provisioning_service.application.builders import ObjectBuilder
from provisioning_service.kernel.ddd import Record
from provisioning_service.kernel.errors import BaseError, CommandError
from provisioning_service.kernel.messaging import SyncEventKind, SyncMessage
from provisioning_service.kernel.types import Err
from provisioning_service.observability.logging import get_logger

type ChangeFilter = Callable[[Record, Record], bool]


def structural_change(baseline: Record, new_state: Record) -> bool:
    """Default change filter: any difference in the compared data fields."""
    return baseline != new_state


class SyncHandler(abc.ABC):
    """React to Create/Update/Delete-Sync events for one object type."""

    @abc.abstractmethod
    def on_create(self, obj: Record, message: SyncMessage) -> None: ...

    @abc.abstractmethod
    def on_update(self, obj: Record, baseline: Record, message: SyncMessage) -> None: ...

    @abc.abstractmethod
    def on_delete(self, obj: Record, message: SyncMessage) -> None: ...


class SyncCommand:
    """Consume sync messages published by request commands.

    Messages about other object types are ignored.  Updates whose new state
    carries no meaningful change against the baseline are skipped.  There is
    no reply channel, so every failure is raised as :class:`CommandError`
    for the transport to escalate.
    """

    def __init__(
        self,
        object_type: str,
        handler: SyncHandler,
        builder: ObjectBuilder,
        object_class: type[Record],
        *,
        change_filter: ChangeFilter = structural_change,
        logger: Any = None,
    ) -> None:
        self.object_type = object_type
        self._handler = handler
        self._builder = builder
        self._object_class = object_class
        self._change_filter = change_filter
        self._log = logger or get_logger(__name__, object_type=object_type)

    def execute(self, message: SyncMessage) -> bool:
        """Handle *message*; return ``False`` when it was ignored or skipped."""
        if message.object_type != self.object_type:
            self._log.info("sync_ignored", received=message.object_type)
            return False

        started = time.monotonic()
        obj = self._build(message.data, "NewData" if message.kind is not SyncEventKind.DELETE else "DeleteData")
        try:
            if message.kind is SyncEventKind.CREATE:
                self._handler.on_create(obj, message)
            elif message.kind is SyncEventKind.UPDATE:
                baseline = self._build(message.baseline, "BaselineData")
                if not self._change_filter(baseline, obj):
                    self._log.info("sync_skipped", reason="no meaningful data change")
                    return False
                self._handler.on_update(obj, baseline, message)
            else:
                self._handler.on_delete(obj, message)
        except CommandError:
            raise
        except Exception as exc:
            self._log.error("sync_handler_failed", sync_kind=message.kind.value, error=str(exc))
            raise CommandError(
                f"An error occurred handling the {self.object_type}.{message.kind.value}-Sync message: {exc}",
                cause=exc,
            ) from exc
        self._log.info(
            "sync_handled",
            sync_kind=message.kind.value,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )
        return True

    def _build(self, fragment: Any, element: str) -> Record:
        built = self._builder.build(fragment, self._object_class, element=element)
        if isinstance(built, Err):
            error: BaseError = built.error
            self._log.error("sync_build_failed", error=error.to_dict())
            raise CommandError(
                f"Could not build the {self.object_type} object from the sync message: {error.message}",
                cause=error,
            ) from error
        return built.value


__all__ = ["ChangeFilter", "SyncCommand", "SyncHandler", "structural_change"]
