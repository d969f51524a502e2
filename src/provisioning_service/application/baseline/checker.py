"""Application baseline – optimistic concurrency check for Update requests."""
from __future__ import annotations

import dataclasses
from enum import StrEnum
from typing import Any

from provisioning_service.application.requests import RequestReplyClient
from provisioning_service.kernel.ddd import QuerySpecification, Record
from provisioning_service.kernel.errors import (
    AmbiguousBaselineError,
    BaselineConflictError,
    BaselineStaleError,
    DomainError,
    MalformedRequestError,
    NoOpUpdateError,
)
from provisioning_service.observability.logging import get_logger


class BaselineOutcome(StrEnum):
    MATCH = "match"
    STALE = "stale"
    CONFLICT = "conflict"
    NO_OP_REJECTED = "no_op_rejected"


@dataclasses.dataclass(frozen=True)
class BaselineCheck:
    """Outcome of comparing a client baseline with the current record."""

    outcome: BaselineOutcome
    current: Record | None = None
    description: str = ""

    @property
    def may_proceed(self) -> bool:
        return self.outcome is BaselineOutcome.MATCH

    def error(self, object_type: str = "object") -> DomainError | None:
        """Return the error matching a non-``MATCH`` outcome, else ``None``."""
        if self.outcome is BaselineOutcome.STALE:
            return BaselineStaleError()
        if self.outcome is BaselineOutcome.CONFLICT:
            return BaselineConflictError()
        if self.outcome is BaselineOutcome.NO_OP_REJECTED:
            return NoOpUpdateError(object_type)
        return None

    def raise_for_outcome(self, object_type: str = "object") -> None:
        error = self.error(object_type)
        if error is not None:
            raise error


class BaselineConflictChecker:
    """Decide whether an update may proceed against the current record.

    The current record is fetched through *client* using a query
    specification keyed by the baseline's identity.  The decision table:

    ====================  ========================  =====================
    current records       comparison                outcome
    ====================  ========================  =====================
    none                  –                         ``STALE``
    one                   current != baseline       ``CONFLICT``
    one                   baseline == new state     ``NO_OP_REJECTED``
    one                   baseline != new state     ``MATCH``
    more than one         –                         AmbiguousBaselineError
    ====================  ========================  =====================

    Only the compare step is guarded; the caller's mutation is a separate
    remote call, so the store's own concurrency control has the final say.
    """

    def __init__(
        self,
        client: RequestReplyClient,
        spec_class: type[QuerySpecification],
        *,
        logger: Any = None,
    ) -> None:
        self._client = client
        self._spec_class = spec_class
        self._log = logger or get_logger(__name__)

    def check(self, baseline: Record | None, new_state: Record | None) -> BaselineCheck:
        if baseline is None or new_state is None:
            raise MalformedRequestError(
                "Either the baseline or new data state of the object is null. Can't continue.",
                element="BaselineData" if baseline is None else "NewData",
            )

        spec = self._spec_class.for_identity(baseline)
        self._log.info("querying_baseline", identity=baseline.identity)
        results = self._client.query(spec, object_type=baseline.object_type())
        self._log.info("baseline_query_complete", results=len(results))

        if not results:
            return BaselineCheck(BaselineOutcome.STALE, description="Baseline is stale. No baseline found.")
        if len(results) > 1:
            raise AmbiguousBaselineError(baseline.identity, len(results))

        current = results[0]
        if current != baseline:
            self._log.info("baseline_mismatch", identity=baseline.identity)
            return BaselineCheck(BaselineOutcome.CONFLICT, current, "Baseline is stale.")
        if baseline == new_state:
            return BaselineCheck(
                BaselineOutcome.NO_OP_REJECTED,
                current,
                "Baseline state and new state are equal. No update operation may be performed.",
            )
        self._log.info("baseline_matches", identity=baseline.identity)
        return BaselineCheck(BaselineOutcome.MATCH, current)


__all__ = ["BaselineCheck", "BaselineConflictChecker", "BaselineOutcome"]
