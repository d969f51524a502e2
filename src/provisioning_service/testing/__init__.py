"""Testing support – in-memory fakes for request channels, providers and sync channels."""

from provisioning_service.testing.fakes import (
    InMemoryProvider,
    RecordingSyncChannel,
    ScriptedChannelFactory,
    ScriptedRequestChannel,
    error_reply,
)
from provisioning_service.testing.samples import (
    Account,
    AccountQuerySpecification,
    AccountRequisition,
    account_from_requisition,
)

__all__ = [
    "Account",
    "AccountQuerySpecification",
    "AccountRequisition",
    "InMemoryProvider",
    "RecordingSyncChannel",
    "ScriptedChannelFactory",
    "ScriptedRequestChannel",
    "account_from_requisition",
    "error_reply",
]
