"""Observability – structured logging helpers."""
from provisioning_service.observability.logging.factory import configure_logging
from provisioning_service.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
)
from provisioning_service.observability.logging.processors import (
    bind_message_context,
    clear_message_context,
    get_logger,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitiveFieldsFilter",
    "bind_message_context",
    "clear_message_context",
    "configure_logging",
    "get_logger",
]
