"""QuerySpecification – filter objects sent with Query requests."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from provisioning_service.kernel.ddd.record import Record
from provisioning_service.kernel.errors.domain import MalformedRequestError

S = TypeVar("S", bound="QuerySpecification")


@dataclasses.dataclass(frozen=True)
class QuerySpecification:
    """Base for per-object query specifications.

    Subclasses declare optional filter fields (``None`` means "not set").
    A specification with no populated field is malformed.
    """

    def criteria(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.criteria()

    def validate(self) -> None:
        if self.is_empty():
            raise MalformedRequestError(
                f"{type(self).__name__} has no criteria set",
                element=type(self).__name__,
            )

    @classmethod
    def for_identity(cls: type[S], record: Record) -> S:
        """Build a specification keyed by *record*'s identity field."""
        try:
            spec = cls(**{record.identity_field: record.identity})
        except TypeError as exc:
            raise MalformedRequestError(
                f"{cls.__name__} cannot be keyed by '{record.identity_field}'",
                element=cls.__name__,
                cause=exc,
            ) from exc
        spec.validate()
        return spec


__all__ = ["QuerySpecification"]
