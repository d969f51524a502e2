"""Application commands – request and sync commands, wiring and workers."""
from provisioning_service.application.commands.bootstrap import build_request_command
from provisioning_service.application.commands.context import CommandContext
from provisioning_service.application.commands.dispatcher import RequestCommand
from provisioning_service.application.commands.handlers import (
    HANDLERS,
    Handler,
    handle_create,
    handle_delete,
    handle_generate,
    handle_query,
    handle_update,
)
from provisioning_service.application.commands.sync_command import (
    ChangeFilter,
    SyncCommand,
    SyncHandler,
    structural_change,
)
from provisioning_service.application.commands.workers import CommandWorkerPool

__all__ = [
    "HANDLERS",
    "ChangeFilter",
    "CommandContext",
    "CommandWorkerPool",
    "Handler",
    "RequestCommand",
    "SyncCommand",
    "SyncHandler",
    "build_request_command",
    "handle_create",
    "handle_delete",
    "handle_generate",
    "handle_query",
    "handle_update",
    "structural_change",
]
