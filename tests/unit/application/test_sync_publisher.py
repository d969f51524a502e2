"""Unit tests for SyncPublisher."""

from __future__ import annotations

import pytest

from provisioning_service.application.sync import SyncPublisher
from provisioning_service.kernel.errors import PublishFailedError
from provisioning_service.kernel.messaging import SyncEventKind
from provisioning_service.testing import Account, RecordingSyncChannel


@pytest.fixture
def channel() -> RecordingSyncChannel:
    return RecordingSyncChannel()


@pytest.fixture
def publisher(channel: RecordingSyncChannel) -> SyncPublisher:
    return SyncPublisher(channel, source_app_id="provisioning")


class TestSyncPublisher:
    def test_publish_create(self, publisher: SyncPublisher, channel: RecordingSyncChannel) -> None:
        obj = Account(account_id="1", account_name="a")
        message = publisher.publish_create(obj, auth_user_id="jdoe@emory.edu/10.0.0.1", test_id="t-1")
        assert channel.published == [message]
        assert message.kind is SyncEventKind.CREATE
        assert message.object_type == "Account"
        assert message.data is obj
        assert message.baseline is None
        assert message.sender_app_id == "provisioning"
        assert message.auth_user_id == "jdoe@emory.edu/10.0.0.1"
        assert message.test_id == "t-1"

    def test_publish_update_carries_baseline(self, publisher: SyncPublisher) -> None:
        obj = Account(account_id="1", account_name="new")
        obj.attach_baseline(Account(account_id="1", account_name="old"))
        message = publisher.publish_update(obj)
        assert message.kind is SyncEventKind.UPDATE
        assert message.baseline == Account(account_id="1", account_name="old")

    def test_publish_delete_has_no_baseline(self, publisher: SyncPublisher) -> None:
        obj = Account(account_id="1")
        obj.attach_baseline(Account(account_id="1", account_name="old"))
        assert publisher.publish_delete(obj).baseline is None

    def test_test_id_falls_back_to_object(self, publisher: SyncPublisher) -> None:
        assert publisher.publish_create(Account(account_id="1", test_id="obj-t")).test_id == "obj-t"

    def test_transport_failure_raises_publish_failed(self, channel: RecordingSyncChannel, publisher: SyncPublisher) -> None:
        channel.fail_with = ConnectionError("broker unreachable")
        with pytest.raises(PublishFailedError) as info:
            publisher.publish_create(Account(account_id="1"))
        assert info.value.event == "Account.Create-Sync"
        assert "broker unreachable" in info.value.message
        assert isinstance(info.value.__cause__, ConnectionError)
