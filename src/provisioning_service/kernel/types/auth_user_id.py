"""AuthUserId value object – ``principal/ipAddress``."""

from __future__ import annotations

import dataclasses
import ipaddress
import re
from typing import Final

from provisioning_service.kernel.errors.domain import InvalidAuthUserIdError

_EMAIL_PATTERN: Final = re.compile(
    r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$"
)


@dataclasses.dataclass(frozen=True, slots=True)
class AuthUserId:
    """Authenticated caller identity carried in every request control area.

    ``principal`` is the caller's EPPN (an email-like ``user@domain``) and
    ``ip_address`` the address the request originated from.
    """

    principal: str
    ip_address: str

    def __post_init__(self) -> None:
        raw = f"{self.principal}/{self.ip_address}"
        if not _EMAIL_PATTERN.match(self.principal):
            raise InvalidAuthUserIdError(raw, f"principal '{self.principal}' is not an e-mail address")
        try:
            ipaddress.ip_address(self.ip_address)
        except ValueError as exc:
            raise InvalidAuthUserIdError(
                raw, f"'{self.ip_address}' is not an IP address", cause=exc
            ) from exc

    def __str__(self) -> str:
        return f"{self.principal}/{self.ip_address}"

    @classmethod
    def parse(
        cls,
        value: str,
        *,
        sentinel_principal: str | None = None,
        sentinel_fallback: str | None = None,
    ) -> "AuthUserId":
        """Parse ``principal/ipAddress``.

        When *value* equals *sentinel_principal* (case-insensitive) it is
        replaced by *sentinel_fallback* before validation; the test-suite
        application sends a bare name instead of a real identity.
        """
        if (
            sentinel_principal is not None
            and sentinel_fallback is not None
            and value.strip().lower() == sentinel_principal.lower()
        ):
            value = sentinel_fallback
        principal, sep, ip = value.strip().partition("/")
        if not sep or not principal or not ip:
            raise InvalidAuthUserIdError(value, "it does not consist of two tokens")
        return cls(principal=principal, ip_address=ip)


__all__ = ["AuthUserId"]
