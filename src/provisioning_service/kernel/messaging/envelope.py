"""Kernel messaging – inbound request envelope."""
from __future__ import annotations

import dataclasses
from enum import StrEnum
from typing import Any
from uuid import uuid4


class MessageAction(StrEnum):
    """Actions a request command can be asked to perform."""

    QUERY = "Query"
    GENERATE = "Generate"
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"

    @classmethod
    def parse(cls, value: str) -> "MessageAction | None":
        """Match *value* case-insensitively; ``None`` when unknown."""
        wanted = value.strip().lower()
        for action in cls:
            if action.value.lower() == wanted:
                return action
        return None


@dataclasses.dataclass(frozen=True)
class DataArea:
    """Payload fragments of a request; each one is opaque to the core."""

    new_data: Any = None
    delete_data: Any = None
    baseline_data: Any = None
    query_specification: Any = None
    requisition: Any = None


@dataclasses.dataclass(frozen=True)
class Envelope:
    """Request message as handed over by the consumer framework."""

    action: str
    object_type: str
    auth_user_id: str
    sender_app_id: str = ""
    payload: DataArea = dataclasses.field(default_factory=DataArea)
    test_id: str | None = None
    message_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    message_release: str = "1.0"

    @property
    def message_action(self) -> MessageAction | None:
        return MessageAction.parse(self.action)


__all__ = ["DataArea", "Envelope", "MessageAction"]
