"""Observability – get_logger and per-message context binding."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from provisioning_service.kernel.messaging.envelope import Envelope

_MESSAGE_KEYS = ("message_id", "object_type", "action", "sender_app_id", "test_id")


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def bind_message_context(envelope: "Envelope") -> None:
    """Bind the envelope's control-area fields to structlog contextvars.

    Every log line emitted while the message is processed on this thread
    carries them.
    """
    structlog.contextvars.bind_contextvars(
        message_id=envelope.message_id,
        object_type=envelope.object_type,
        action=envelope.action,
        sender_app_id=envelope.sender_app_id,
        test_id=envelope.test_id,
    )


def clear_message_context() -> None:
    structlog.contextvars.unbind_contextvars(*_MESSAGE_KEYS)


__all__ = ["bind_message_context", "clear_message_context", "get_logger"]
