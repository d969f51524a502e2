"""Testing fakes – in-memory doubles for the messaging and provider ports."""
from provisioning_service.testing.fakes.channels import (
    ScriptedChannelFactory,
    ScriptedRequestChannel,
    error_reply,
)
from provisioning_service.testing.fakes.provider import InMemoryProvider
from provisioning_service.testing.fakes.sync import RecordingSyncChannel

__all__ = [
    "InMemoryProvider",
    "RecordingSyncChannel",
    "ScriptedChannelFactory",
    "ScriptedRequestChannel",
    "error_reply",
]
