"""Kernel messaging – envelopes, replies and transport ports."""
from provisioning_service.kernel.messaging.envelope import DataArea, Envelope, MessageAction
from provisioning_service.kernel.messaging.ports import (
    ChannelFactory,
    RequestChannel,
    SyncChannel,
    SyncEventKind,
    SyncMessage,
)
from provisioning_service.kernel.messaging.reply import ErrorEntry, ReplyEnvelope, ReplyStatus

__all__ = [
    "ChannelFactory",
    "DataArea",
    "Envelope",
    "ErrorEntry",
    "MessageAction",
    "ReplyEnvelope",
    "ReplyStatus",
    "RequestChannel",
    "SyncChannel",
    "SyncEventKind",
    "SyncMessage",
]
