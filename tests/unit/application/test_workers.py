"""Unit tests for CommandWorkerPool."""

from __future__ import annotations

from typing import Callable

import pytest

from provisioning_service.application.commands import CommandWorkerPool, RequestCommand
from provisioning_service.kernel.errors import CommandError
from provisioning_service.kernel.messaging import Envelope
from provisioning_service.kernel.types import Err, Ok
from provisioning_service.testing import Account, InMemoryProvider, RecordingSyncChannel, ScriptedChannelFactory


class TestCommandWorkerPool:
    def test_results_keep_input_order(
        self, make_command: Callable[..., RequestCommand], make_envelope: Callable[..., Envelope]
    ) -> None:
        envelopes = [make_envelope("Create", new_data={"account_id": str(i)}) for i in range(20)]
        with CommandWorkerPool(make_command(), max_workers=4) as workers:
            outcomes = workers.execute_all(envelopes)
        assert all(isinstance(o, Ok) for o in outcomes)
        assert [o.unwrap().message_id for o in outcomes] == [e.message_id for e in envelopes]

    def test_workers_share_one_lease_pool(
        self,
        make_command: Callable[..., RequestCommand],
        make_envelope: Callable[..., Envelope],
        channel_factory: ScriptedChannelFactory,
    ) -> None:
        channel_factory.records.extend(Account(account_id=str(i)) for i in range(12))
        channel_factory.delay_seconds = 0.002
        command = make_command(pool_max_size=2, lease_timeout_seconds=5.0)
        envelopes = [
            make_envelope("Update", baseline_data={"account_id": str(i)}, new_data={"account_id": str(i), "owner_id": "x"})
            for i in range(12)
        ]
        with CommandWorkerPool(command, max_workers=6) as workers:
            outcomes = workers.execute_all(envelopes)
        assert all(o.unwrap().is_success for o in outcomes)
        assert len(channel_factory.opened) <= 2
        assert channel_factory.overlapping_uses == 0
        assert command.context.pool is not None and command.context.pool.outstanding == 0

    def test_escalated_failures_become_err(
        self,
        make_command: Callable[..., RequestCommand],
        make_envelope: Callable[..., Envelope],
        sync_channel: RecordingSyncChannel,
        provider: InMemoryProvider,
    ) -> None:
        sync_channel.fail_with = ConnectionError("broker down")
        with CommandWorkerPool(make_command(), max_workers=2) as workers:
            outcomes = workers.execute_all(
                [make_envelope("Create", new_data={"account_id": "1"}), make_envelope("Frobnicate")]
            )
        assert isinstance(outcomes[0], Err)
        assert isinstance(outcomes[0].error, CommandError)
        assert isinstance(outcomes[1], Ok)
        assert provider.operations() == ["create"]

    def test_submit_returns_future(
        self, make_command: Callable[..., RequestCommand], make_envelope: Callable[..., Envelope]
    ) -> None:
        with CommandWorkerPool(make_command(), max_workers=1) as workers:
            reply = workers.submit(make_envelope("Frobnicate")).result(timeout=5)
        assert reply.errors[0].code == "UnsupportedMessageAction"

    def test_invalid_worker_count(self, make_command: Callable[..., RequestCommand]) -> None:
        with pytest.raises(ValueError):
            CommandWorkerPool(make_command(), max_workers=0)
