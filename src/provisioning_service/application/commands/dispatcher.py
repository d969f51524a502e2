"""Application commands – RequestCommand dispatcher."""
from __future__ import annotations

import dataclasses

from provisioning_service.application.commands.context import CommandContext
from provisioning_service.application.commands.handlers import HANDLERS
from provisioning_service.kernel.errors import (
    BaseError,
    InvalidAuthUserIdError,
    UnsupportedMessageActionError,
    UnsupportedMessageObjectError,
)
from provisioning_service.kernel.messaging import Envelope, ReplyEnvelope
from provisioning_service.kernel.types import AuthUserId
from provisioning_service.observability.logging import (
    bind_message_context,
    clear_message_context,
)


class RequestCommand:
    """Validate an inbound request and route it to its action handler.

    Checks run in a fixed order: object type, requester identity, action.
    The first failing check answers the request with a single error entry.
    Every request yields a :class:`ReplyEnvelope`; a publish failure under
    the ``escalate`` policy is the only case that raises (``CommandError``).
    """

    def __init__(self, context: CommandContext) -> None:
        self.context = context

    @property
    def object_type(self) -> str:
        return self.context.object_type

    def execute(self, envelope: Envelope) -> ReplyEnvelope:
        bind_message_context(envelope)
        try:
            return self._execute(envelope)
        finally:
            clear_message_context()

    def _execute(self, envelope: Envelope) -> ReplyEnvelope:
        ctx = self.context
        settings = ctx.settings
        if settings.verbose:
            ctx.logger.info("request_received", payload=dataclasses.asdict(envelope.payload))

        if envelope.object_type != ctx.object_type:
            return self._reject(envelope, UnsupportedMessageObjectError(envelope.object_type, ctx.object_type))

        try:
            auth = AuthUserId.parse(
                envelope.auth_user_id,
                sentinel_principal=settings.test_suite_principal,
                sentinel_fallback=settings.test_suite_auth_user_id,
            )
        except InvalidAuthUserIdError as exc:
            return self._reject(envelope, exc)

        action = envelope.message_action
        if action is None or action.value not in settings.supported_actions:
            return self._reject(
                envelope, UnsupportedMessageActionError(envelope.action, settings.supported_actions)
            )

        ctx.logger.info("dispatching", handler=action.value, auth_user_id=str(auth))
        return HANDLERS[action](ctx, envelope, auth)

    def close(self) -> None:
        """Close the request channels owned by this command."""
        if self.context.pool is not None:
            self.context.pool.close()

    def _reject(self, envelope: Envelope, error: BaseError) -> ReplyEnvelope:
        self.context.logger.warning("request_rejected", error=error.to_dict())
        return ReplyEnvelope.with_errors(envelope, [error])


__all__ = ["RequestCommand"]
