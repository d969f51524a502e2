"""Application commands – CommandWorkerPool."""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any, Iterable

from provisioning_service.application.commands.dispatcher import RequestCommand
from provisioning_service.kernel.errors import CommandError
from provisioning_service.kernel.messaging import Envelope, ReplyEnvelope
from provisioning_service.kernel.types import Err, Ok, Result
from provisioning_service.observability.logging import get_logger


class CommandWorkerPool:
    """Run one request command for many envelopes on a thread pool.

    Each envelope is handled by a single worker from start to finish.  The
    workers share the command, and with it one resource lease pool.
    """

    def __init__(self, command: RequestCommand, max_workers: int = 4, *, logger: Any = None) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self._command = command
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=f"{command.object_type}-worker"
        )
        self._log = logger or get_logger(__name__, object_type=command.object_type)

    def submit(self, envelope: Envelope) -> Future[ReplyEnvelope]:
        return self._executor.submit(self._command.execute, envelope)

    def execute_all(self, envelopes: Iterable[Envelope]) -> list[Result[ReplyEnvelope, CommandError]]:
        """Execute every envelope and return the outcomes in input order.

        ``CommandError`` raised by a message becomes an ``Err`` entry; any other
        exception propagates.
        """
        futures = {self.submit(envelope): index for index, envelope in enumerate(envelopes)}
        outcomes: list[Result[ReplyEnvelope, CommandError]] = [None] * len(futures)  # type: ignore[list-item]
        for future in as_completed(futures):
            index = futures[future]
            try:
                outcomes[index] = Ok(future.result())
            except CommandError as exc:
                self._log.critical("command_escalated", index=index, error=exc.to_dict())
                outcomes[index] = Err(exc)
        return outcomes

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "CommandWorkerPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


__all__ = ["CommandWorkerPool"]
