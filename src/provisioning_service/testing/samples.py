"""Testing samples – a minimal Account object family for exercising commands."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from provisioning_service.kernel.ddd import QuerySpecification, Record


@dataclasses.dataclass
class Account(Record):
    identity_field: ClassVar[str] = "account_id"

    account_id: str
    account_name: str = ""
    owner_id: str = ""
    compliance_class: str = "Standard"


@dataclasses.dataclass(frozen=True)
class AccountQuerySpecification(QuerySpecification):
    account_id: str | None = None
    account_name: str | None = None
    owner_id: str | None = None


@dataclasses.dataclass(frozen=True)
class AccountRequisition:
    account_name: str
    owner_id: str


def account_from_requisition(requisition: AccountRequisition, account_id: str = "123456789012") -> Account:
    return Account(account_id=account_id, account_name=requisition.account_name, owner_id=requisition.owner_id)


__all__ = ["Account", "AccountQuerySpecification", "AccountRequisition", "account_from_requisition"]
