"""Record base class – provisioned objects compared by value."""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass(frozen=True, slots=True)
class Authentication:
    """Identity stamp attached to generated objects before they are published."""

    auth_user_id: str
    auth_user_signature: str = "none"


@dataclasses.dataclass
class Record:
    """Base class for provisioned objects (Account, VPC, RoleProvisioning, …).

    Subclasses are ``@dataclass`` types declaring their data fields and
    naming one of them in ``identity_field``.  Equality is structural over
    the data fields only: the attached ``baseline``, ``authentication`` stamp
    and ``test_id`` never take part in comparison.

    Example::

        @dataclasses.dataclass
        class Account(Record):
            identity_field: ClassVar[str] = "account_id"

            account_id: str
            account_name: str = ""
    """

    identity_field: ClassVar[str] = "id"

    baseline: "Record | None" = dataclasses.field(
        default=None, compare=False, repr=False, kw_only=True
    )
    authentication: Authentication | None = dataclasses.field(
        default=None, compare=False, repr=False, kw_only=True
    )
    test_id: str | None = dataclasses.field(
        default=None, compare=False, repr=False, kw_only=True
    )

    @classmethod
    def object_type(cls) -> str:
        return cls.__name__

    @property
    def identity(self) -> Any:
        return getattr(self, self.identity_field)

    def attach_baseline(self, baseline: "Record") -> None:
        self.baseline = baseline

    def stamp(self, authentication: Authentication, test_id: str | None = None) -> None:
        self.authentication = authentication
        if test_id is not None:
            self.test_id = test_id


__all__ = ["Authentication", "Record"]
