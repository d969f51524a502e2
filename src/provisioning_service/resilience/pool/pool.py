"""Resilience – ResourceLeasePool, LeasedResource."""
from __future__ import annotations

import collections
import contextlib
import dataclasses
import itertools
import threading
import time
from typing import Any, Iterator

from provisioning_service.kernel.errors import PoolExhaustedError
from provisioning_service.kernel.messaging.ports import ChannelFactory, RequestChannel
from provisioning_service.observability.logging import get_logger

_lease_ids = itertools.count(1)


@dataclasses.dataclass(eq=False)
class LeasedResource:
    """Exclusive handle to one pooled request channel."""

    channel: RequestChannel
    pool_name: str
    request_timeout_seconds: float | None = None
    lease_id: int = dataclasses.field(default_factory=lambda: next(_lease_ids))
    released: bool = dataclasses.field(default=False, init=False)


class ResourceLeasePool:
    """Bounded pool of reusable request channels.

    ``lease()`` hands out an idle channel, opens a new one while fewer than
    ``max_size`` exist, and otherwise waits up to ``lease_timeout_seconds``
    for one to be released.  Every successful lease must be released exactly
    once; ``leased()`` guarantees it.

    Parameters
    ----------
    name:
        Pool identifier used in logs and errors.
    factory:
        Opens new channels on demand.
    max_size:
        Maximum number of channels, leased or idle.
    lease_timeout_seconds:
        How long ``lease()`` waits for a free channel.
    request_timeout_seconds:
        Timeout stamped on every lease; ``None`` keeps the transport default.
    """

    def __init__(
        self,
        name: str,
        factory: ChannelFactory,
        *,
        max_size: int = 4,
        lease_timeout_seconds: float = 5.0,
        request_timeout_seconds: float | None = None,
        logger: Any = None,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.name = name
        self.max_size = max_size
        self.lease_timeout_seconds = lease_timeout_seconds
        self.request_timeout_seconds = request_timeout_seconds
        self._factory = factory
        self._idle: collections.deque[RequestChannel] = collections.deque()
        self._leased: dict[int, LeasedResource] = {}
        self._size = 0
        self._cond = threading.Condition()
        self._closed = False
        self._log = logger or get_logger(__name__, pool=name)

    @property
    def outstanding(self) -> int:
        with self._cond:
            return len(self._leased)

    @property
    def idle(self) -> int:
        with self._cond:
            return len(self._idle)

    @property
    def size(self) -> int:
        with self._cond:
            return self._size

    def lease(self) -> LeasedResource:
        deadline = time.monotonic() + self.lease_timeout_seconds
        channel: RequestChannel | None = None
        with self._cond:
            while True:
                if self._closed:
                    raise PoolExhaustedError(self.name, f"Pool '{self.name}' is closed")
                if self._idle:
                    channel = self._idle.popleft()
                    break
                if self._size < self.max_size:
                    # reserve the slot; the channel is opened outside the lock
                    self._size += 1
                    break
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._log.error("lease_timeout", waited_seconds=self.lease_timeout_seconds)
                    raise PoolExhaustedError(
                        self.name,
                        f"No resource available in pool '{self.name}' "
                        f"within {self.lease_timeout_seconds}s",
                    )
                self._cond.wait(remaining)

        if channel is None:
            try:
                channel = self._factory.open()
            except Exception as exc:
                with self._cond:
                    self._size -= 1
                    self._cond.notify()
                self._log.error("channel_open_failed", error=str(exc))
                raise PoolExhaustedError(
                    self.name,
                    f"An error occurred getting a request channel from pool '{self.name}': {exc}",
                    cause=exc,
                ) from exc

        resource = LeasedResource(
            channel=channel,
            pool_name=self.name,
            request_timeout_seconds=self.request_timeout_seconds,
        )
        with self._cond:
            self._leased[resource.lease_id] = resource
        return resource

    def release(self, resource: LeasedResource | None) -> None:
        """Return *resource* to the pool.  Never raises; repeat calls are no-ops."""
        if resource is None:
            return
        with self._cond:
            if resource.released or self._leased.pop(resource.lease_id, None) is None:
                self._log.debug("release_ignored", lease_id=resource.lease_id)
                return
            resource.released = True
            if self._closed:
                self._size -= 1
                discard = resource.channel
            else:
                self._idle.append(resource.channel)
                discard = None
            self._cond.notify()
        if discard is not None:
            self._close_quietly(discard)

    @contextlib.contextmanager
    def leased(self) -> Iterator[LeasedResource]:
        resource = self.lease()
        try:
            yield resource
        finally:
            self.release(resource)

    def close(self) -> None:
        """Close idle channels; leased ones are closed as they come back."""
        with self._cond:
            self._closed = True
            idle = list(self._idle)
            self._idle.clear()
            self._size -= len(idle)
            self._cond.notify_all()
        for channel in idle:
            self._close_quietly(channel)

    def _close_quietly(self, channel: RequestChannel) -> None:
        try:
            channel.close()
        except Exception as exc:  # noqa: BLE001
            self._log.warning("channel_close_failed", error=str(exc))


__all__ = ["LeasedResource", "ResourceLeasePool"]
