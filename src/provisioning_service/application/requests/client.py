"""Application requests – RequestReplyClient, ExchangeResult."""
from __future__ import annotations

import contextlib
import dataclasses
import time
from typing import Any, Iterator

from provisioning_service.kernel.ddd import QuerySpecification, Record
from provisioning_service.kernel.errors import (
    PoolExhaustedError,
    QueryFailedError,
    RequestFailedError,
)
from provisioning_service.kernel.messaging import (
    DataArea,
    Envelope,
    ErrorEntry,
    MessageAction,
    ReplyEnvelope,
    ReplyStatus,
)
from provisioning_service.observability.logging import get_logger
from provisioning_service.resilience.pool import LeasedResource, ResourceLeasePool


@dataclasses.dataclass(frozen=True)
class ExchangeResult:
    """Acknowledgement of a create/update/delete request."""

    status: ReplyStatus
    data: tuple[Any, ...] = ()
    errors: tuple[ErrorEntry, ...] = ()


class RequestReplyClient:
    """Synchronous request/reply exchanges over leased channels.

    Each call without an explicit *resource* leases one from *pool* and
    releases it exactly once when the call returns or raises.  A resource
    passed in by the caller is used as-is and stays the caller's to release.
    """

    def __init__(
        self,
        pool: ResourceLeasePool,
        *,
        service_name: str | None = None,
        auth_user_id: str = "",
        sender_app_id: str = "",
        logger: Any = None,
    ) -> None:
        self._pool = pool
        self.service_name = service_name or pool.name
        self._auth_user_id = auth_user_id
        self._sender_app_id = sender_app_id
        self._log = logger or get_logger(__name__, service=self.service_name)

    def query(
        self,
        spec: QuerySpecification,
        resource: LeasedResource | None = None,
        *,
        object_type: str | None = None,
    ) -> list[Any]:
        object_type = object_type or _object_type_of(spec)
        request = self._envelope(MessageAction.QUERY, object_type, DataArea(query_specification=spec))
        try:
            reply = self._exchange(request, resource)
        except TimeoutError as exc:
            raise QueryFailedError(
                self.service_name,
                f"Query for {object_type} against '{self.service_name}' timed out",
                timed_out=True,
                cause=exc,
            ) from exc
        except PoolExhaustedError:
            raise
        except Exception as exc:
            raise QueryFailedError(
                self.service_name,
                f"An error occurred querying for {object_type}: {exc}",
                cause=exc,
            ) from exc
        if not reply.is_success:
            raise QueryFailedError(
                self.service_name,
                f"Query for {object_type} was answered with errors: {_describe(reply.errors)}",
                detail={"errors": [dataclasses.asdict(e) for e in reply.errors]},
            )
        return list(reply.data)

    def create(self, obj: Record, resource: LeasedResource | None = None) -> ExchangeResult:
        return self._mutate(MessageAction.CREATE, obj, DataArea(new_data=obj), resource)

    def update(self, obj: Record, resource: LeasedResource | None = None) -> ExchangeResult:
        payload = DataArea(new_data=obj, baseline_data=obj.baseline)
        return self._mutate(MessageAction.UPDATE, obj, payload, resource)

    def delete(self, obj: Record, resource: LeasedResource | None = None) -> ExchangeResult:
        return self._mutate(MessageAction.DELETE, obj, DataArea(delete_data=obj), resource)

    def _mutate(
        self,
        action: MessageAction,
        obj: Record,
        payload: DataArea,
        resource: LeasedResource | None,
    ) -> ExchangeResult:
        object_type = obj.object_type()
        request = self._envelope(action, object_type, payload)
        try:
            reply = self._exchange(request, resource)
        except TimeoutError as exc:
            raise RequestFailedError(
                self.service_name,
                action.value,
                f"{action.value} request for {object_type} timed out",
                timed_out=True,
                cause=exc,
            ) from exc
        except PoolExhaustedError:
            raise
        except Exception as exc:
            raise RequestFailedError(
                self.service_name,
                action.value,
                f"An error occurred sending the {action.value} request for {object_type}: {exc}",
                cause=exc,
            ) from exc
        if not reply.is_success:
            raise RequestFailedError(
                self.service_name,
                action.value,
                f"{action.value} request for {object_type} was answered with errors: "
                f"{_describe(reply.errors)}",
                detail={"errors": [dataclasses.asdict(e) for e in reply.errors]},
            )
        return ExchangeResult(status=reply.status, data=reply.data)

    def _exchange(self, request: Envelope, resource: LeasedResource | None) -> ReplyEnvelope:
        with self._resource(resource) as leased:
            started = time.monotonic()
            reply = leased.channel.request(request, timeout_seconds=leased.request_timeout_seconds)
            self._log.info(
                "exchange_complete",
                action=request.action,
                object_type=request.object_type,
                lease_id=leased.lease_id,
                elapsed_ms=round((time.monotonic() - started) * 1000),
            )
            return reply

    @contextlib.contextmanager
    def _resource(self, resource: LeasedResource | None) -> Iterator[LeasedResource]:
        if resource is not None:
            yield resource
            return
        with self._pool.leased() as leased:
            yield leased

    def _envelope(self, action: MessageAction, object_type: str, payload: DataArea) -> Envelope:
        return Envelope(
            action=action.value,
            object_type=object_type,
            auth_user_id=self._auth_user_id,
            sender_app_id=self._sender_app_id,
            payload=payload,
        )


def _object_type_of(spec: QuerySpecification) -> str:
    name = type(spec).__name__
    return name.removesuffix("QuerySpecification") or name


def _describe(errors: tuple[ErrorEntry, ...]) -> str:
    return "; ".join(f"[{e.code}] {e.description}" for e in errors) or "no error details"


__all__ = ["ExchangeResult", "RequestReplyClient"]
