"""Application providers – Provider port."""
from __future__ import annotations

import abc
from typing import Any

from provisioning_service.kernel.ddd import QuerySpecification, Record
from provisioning_service.kernel.errors import UnsupportedProviderOperationError


class Provider(abc.ABC):
    """Pluggable strategy that queries and mutates one kind of object.

    Only ``query`` is mandatory; the other operations raise
    :class:`UnsupportedProviderOperationError` unless overridden.  Every
    failure is reported as a :class:`ProviderError`.
    """

    @abc.abstractmethod
    def query(self, spec: QuerySpecification) -> list[Record]: ...

    def generate(self, requisition: Any) -> Record:
        raise UnsupportedProviderOperationError(type(self).__name__, "generate")

    def create(self, obj: Record) -> None:
        raise UnsupportedProviderOperationError(type(self).__name__, "create")

    def update(self, obj: Record) -> None:
        raise UnsupportedProviderOperationError(type(self).__name__, "update")

    def delete(self, obj: Record) -> None:
        raise UnsupportedProviderOperationError(type(self).__name__, "delete")


__all__ = ["Provider"]
