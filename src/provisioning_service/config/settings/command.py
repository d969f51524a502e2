"""Config settings – CommandSettings for one request command deployment."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from provisioning_service.config.settings.base import Settings
from provisioning_service.config.validation import InvalidSettingValueError

_ALL_ACTIONS = ["Query", "Generate", "Create", "Update", "Delete"]
_POLICIES = ("escalate", "reply_with_error")


@dataclasses.dataclass
class CommandSettings(Settings):
    """Settings read from ``PROVISIONING_*`` variables.

    ``request_timeout_ms`` of ``-1`` means "use the transport default".
    ``test_suite_principal`` is the sender id that is rewritten to
    ``test_suite_auth_user_id`` before the requester identity is validated.
    """

    _prefix: ClassVar[str] = "PROVISIONING"

    object_type: str
    provider: str
    supported_actions: list[str] = dataclasses.field(default_factory=lambda: list(_ALL_ACTIONS))
    pool_name: str = "AwsAccountServiceRequest"
    pool_max_size: int = 4
    lease_timeout_seconds: float = 5.0
    request_timeout_ms: int = -1
    verbose: bool = False
    publish_failure_policy: str = "escalate"
    test_suite_principal: str = "TestSuiteApplication"
    test_suite_auth_user_id: str = "testsuiteapp@emory.edu/127.0.0.1"
    source_app_id: str = ""
    service_auth_user_id: str = ""

    def _validate(self) -> None:
        if not self.object_type.strip():
            raise InvalidSettingValueError("object_type", self.object_type, "must not be blank")
        if not self.provider.strip():
            raise InvalidSettingValueError("provider", self.provider, "must not be blank")
        if self.pool_max_size < 1:
            raise InvalidSettingValueError("pool_max_size", self.pool_max_size, "must be >= 1")
        if self.lease_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "lease_timeout_seconds", self.lease_timeout_seconds, "must be > 0"
            )
        if self.request_timeout_ms != -1 and self.request_timeout_ms <= 0:
            raise InvalidSettingValueError(
                "request_timeout_ms", self.request_timeout_ms, "must be -1 or > 0"
            )
        if self.publish_failure_policy not in _POLICIES:
            raise InvalidSettingValueError(
                "publish_failure_policy",
                self.publish_failure_policy,
                f"expected one of {', '.join(_POLICIES)}",
            )
        canonical = {a.lower(): a for a in _ALL_ACTIONS}
        unknown = [a for a in self.supported_actions if a.lower() not in canonical]
        if unknown:
            raise InvalidSettingValueError(
                "supported_actions", self.supported_actions, f"unknown actions {unknown}"
            )
        self.supported_actions = [canonical[a.lower()] for a in self.supported_actions]

    @property
    def query_auth_user_id(self) -> str:
        """Identity the command presents on its own baseline queries."""
        return self.service_auth_user_id or self.test_suite_auth_user_id

    @property
    def request_timeout_seconds(self) -> float | None:
        if self.request_timeout_ms == -1:
            return None
        return self.request_timeout_ms / 1000.0


__all__ = ["CommandSettings"]
