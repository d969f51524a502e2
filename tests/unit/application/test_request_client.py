"""Unit tests for RequestReplyClient."""

from __future__ import annotations

import pytest

from provisioning_service.application.requests import RequestReplyClient
from provisioning_service.kernel.errors import (
    PoolExhaustedError,
    QueryFailedError,
    RequestFailedError,
)
from provisioning_service.kernel.messaging import MessageAction, ReplyStatus
from provisioning_service.resilience.pool import ResourceLeasePool
from provisioning_service.testing import (
    Account,
    AccountQuerySpecification,
    ScriptedChannelFactory,
    error_reply,
)


@pytest.fixture
def factory() -> ScriptedChannelFactory:
    return ScriptedChannelFactory(
        [Account(account_id="1", account_name="alpha"), Account(account_id="2", account_name="beta")]
    )


@pytest.fixture
def pool(factory: ScriptedChannelFactory) -> ResourceLeasePool:
    return ResourceLeasePool("AccountRequest", factory, max_size=1, lease_timeout_seconds=0.1, request_timeout_seconds=2.5)


@pytest.fixture
def client(pool: ResourceLeasePool) -> RequestReplyClient:
    return RequestReplyClient(pool, auth_user_id="svc@emory.edu/10.0.0.9", sender_app_id="provisioning")


class TestQuery:
    def test_returns_matching_records(self, client: RequestReplyClient, pool: ResourceLeasePool) -> None:
        results = client.query(AccountQuerySpecification(account_id="1"))
        assert results == [Account(account_id="1", account_name="alpha")]
        assert pool.outstanding == 0

    def test_no_match_returns_empty_list(self, client: RequestReplyClient) -> None:
        assert client.query(AccountQuerySpecification(account_id="404")) == []

    def test_request_envelope(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        spec = AccountQuerySpecification(account_name="beta")
        client.query(spec)
        (request,) = factory.requests
        assert request.message_action is MessageAction.QUERY
        assert request.object_type == "Account"
        assert request.auth_user_id == "svc@emory.edu/10.0.0.9"
        assert request.sender_app_id == "provisioning"
        assert request.payload.query_specification is spec

    def test_request_timeout_is_passed_to_channel(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        client.query(AccountQuerySpecification(account_id="1"))
        assert factory.timeouts == [2.5]

    def test_timeout_becomes_query_failed(
        self, client: RequestReplyClient, factory: ScriptedChannelFactory, pool: ResourceLeasePool
    ) -> None:
        factory.enqueue(TimeoutError("no reply"))
        with pytest.raises(QueryFailedError) as info:
            client.query(AccountQuerySpecification(account_id="1"))
        assert info.value.timed_out is True
        assert pool.outstanding == 0

    def test_transport_error_becomes_query_failed(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        factory.enqueue(ConnectionResetError("reset"))
        with pytest.raises(QueryFailedError) as info:
            client.query(AccountQuerySpecification(account_id="1"))
        assert info.value.timed_out is False
        assert isinstance(info.value.__cause__, ConnectionResetError)

    def test_error_reply_becomes_query_failed(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        factory.enqueue(error_reply("QueryFailed", "database unavailable"))
        with pytest.raises(QueryFailedError) as info:
            client.query(AccountQuerySpecification(account_id="1"))
        assert "database unavailable" in info.value.message
        assert info.value.detail["errors"][0]["code"] == "QueryFailed"

    def test_pool_exhaustion_propagates_unchanged(self, client: RequestReplyClient, pool: ResourceLeasePool) -> None:
        held = pool.lease()
        with pytest.raises(PoolExhaustedError):
            client.query(AccountQuerySpecification(account_id="1"))
        pool.release(held)

    def test_caller_resource_is_not_released(self, client: RequestReplyClient, pool: ResourceLeasePool) -> None:
        resource = pool.lease()
        client.query(AccountQuerySpecification(account_id="1"), resource)
        assert pool.outstanding == 1
        assert not resource.released
        pool.release(resource)


class TestMutations:
    def test_create_adds_record(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        result = client.create(Account(account_id="3", account_name="gamma"))
        assert result.status is ReplyStatus.SUCCESS
        assert Account(account_id="3", account_name="gamma") in factory.records

    def test_update_carries_baseline(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        obj = Account(account_id="1", account_name="alpha-2")
        obj.attach_baseline(Account(account_id="1", account_name="alpha"))
        client.update(obj)
        (request,) = factory.requests_for(MessageAction.UPDATE)
        assert request.payload.baseline_data == Account(account_id="1", account_name="alpha")
        assert client.query(AccountQuerySpecification(account_id="1")) == [obj]

    def test_delete_removes_record(self, client: RequestReplyClient) -> None:
        client.delete(Account(account_id="2"))
        assert client.query(AccountQuerySpecification(account_id="2")) == []

    def test_error_reply_becomes_request_failed(self, client: RequestReplyClient, factory: ScriptedChannelFactory) -> None:
        factory.enqueue(error_reply("Duplicate", "already exists"))
        with pytest.raises(RequestFailedError) as info:
            client.create(Account(account_id="1"))
        assert info.value.operation == "Create"
        assert "already exists" in info.value.message

    def test_timeout_becomes_request_failed(
        self, client: RequestReplyClient, factory: ScriptedChannelFactory, pool: ResourceLeasePool
    ) -> None:
        factory.enqueue(TimeoutError())
        with pytest.raises(RequestFailedError) as info:
            client.delete(Account(account_id="1"))
        assert info.value.timed_out is True
        assert pool.outstanding == 0
