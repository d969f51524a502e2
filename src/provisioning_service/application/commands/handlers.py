"""Application commands – per-action handlers of the request command.

Each handler takes the command context, the inbound envelope and the parsed
requester identity and returns the reply.  Builder, provider and checker
failures, transport failures of the provider included, are carried as
``Err`` values and turned into error replies; only a publish failure under
the ``escalate`` policy leaves as ``CommandError``.
"""
from __future__ import annotations

import contextlib
import time
from typing import Any, Callable, Iterator

from provisioning_service.application.commands.context import CommandContext
from provisioning_service.application.sync import PublishFailurePolicy
from provisioning_service.kernel.ddd import Authentication, Record
from provisioning_service.kernel.errors import (
    AmbiguousBaselineError,
    BaseError,
    CommandError,
    InfrastructureError,
    MalformedRequestError,
    PoolExhaustedError,
    ProviderError,
    PublishFailedError,
    QueryFailedError,
)
from provisioning_service.kernel.messaging import (
    Envelope,
    ErrorEntry,
    MessageAction,
    ReplyEnvelope,
    SyncEventKind,
)
from provisioning_service.kernel.types import AuthUserId, Err, Result, attempt

type Handler = Callable[[CommandContext, Envelope, AuthUserId], ReplyEnvelope]

# Failures a provider may raise on its own backend or on a request/reply transport.
_PROVIDER_FAILURES: tuple[type[BaseError], ...] = (ProviderError, InfrastructureError)


@contextlib.contextmanager
def _timed(ctx: CommandContext, action: MessageAction) -> Iterator[None]:
    started = time.monotonic()
    try:
        yield
    finally:
        ctx.logger.info(
            "handler_complete",
            handler=action.value,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )


def _error_reply(ctx: CommandContext, request: Envelope, error: BaseError) -> ReplyEnvelope:
    if isinstance(error, _PROVIDER_FAILURES):
        ctx.logger.error("provider_error", error=error.to_dict())
    else:
        ctx.logger.warning("request_rejected", error=error.to_dict())
    return ReplyEnvelope.with_errors(request, [error])


def _build[T](
    ctx: CommandContext, fragment: Any, target: type[T], element: str
) -> Result[T, MalformedRequestError]:
    return ctx.builder.build(fragment, target, element=element)


def _publish(
    ctx: CommandContext,
    request: Envelope,
    kind: SyncEventKind,
    obj: Record,
    auth: AuthUserId,
) -> ReplyEnvelope | None:
    """Publish the sync message for a committed mutation.

    Returns an error reply under the ``reply_with_error`` policy, ``None``
    when the message went out or no publisher is configured.
    """
    if ctx.publisher is None:
        return None
    try:
        ctx.publisher.publish(kind, obj, auth_user_id=str(auth), test_id=request.test_id)
    except PublishFailedError as exc:
        ctx.logger.critical("sync_publication_failed", sync_kind=kind.value, error=exc.to_dict())
        description = (
            f"The {request.action} of {ctx.object_type} was committed but its "
            f"{kind.value}-Sync message could not be published: {exc.message}"
        )
        if ctx.publish_failure_policy is PublishFailurePolicy.ESCALATE:
            raise CommandError(description, cause=exc) from exc
        entry = ErrorEntry(type=exc.error_type, code=exc.code, description=description)
        return ReplyEnvelope.with_errors(request, [entry])
    return None


def handle_query(ctx: CommandContext, request: Envelope, auth: AuthUserId) -> ReplyEnvelope:
    with _timed(ctx, MessageAction.QUERY):
        built = _build(ctx, request.payload.query_specification, ctx.query_spec_class, "QuerySpecification")
        if isinstance(built, Err):
            return _error_reply(ctx, request, built.error)
        spec = built.value

        queried = attempt(lambda: ctx.provider.query(spec), *_PROVIDER_FAILURES)
        if isinstance(queried, Err):
            return _error_reply(ctx, request, queried.error)
        ctx.logger.info("query_complete", results=len(queried.value))
        return ReplyEnvelope.with_results(request, queried.value)


def handle_generate(ctx: CommandContext, request: Envelope, auth: AuthUserId) -> ReplyEnvelope:
    with _timed(ctx, MessageAction.GENERATE):
        built = _build(ctx, request.payload.requisition, ctx.requisition_class, "GenerateData")
        if isinstance(built, Err):
            return _error_reply(ctx, request, built.error)
        requisition = built.value

        generated = attempt(lambda: ctx.provider.generate(requisition), *_PROVIDER_FAILURES)
        if isinstance(generated, Err):
            return _error_reply(ctx, request, generated.error)
        obj = generated.value
        obj.stamp(Authentication(auth_user_id=str(auth)), request.test_id)

        failed = _publish(ctx, request, SyncEventKind.CREATE, obj, auth)
        if failed is not None:
            return failed
        return ReplyEnvelope.with_object(request, obj)


def handle_create(ctx: CommandContext, request: Envelope, auth: AuthUserId) -> ReplyEnvelope:
    with _timed(ctx, MessageAction.CREATE):
        built = _build(ctx, request.payload.new_data, ctx.object_class, "NewData")
        if isinstance(built, Err):
            return _error_reply(ctx, request, built.error)
        obj = built.value

        created = attempt(lambda: ctx.provider.create(obj), *_PROVIDER_FAILURES)
        if isinstance(created, Err):
            return _error_reply(ctx, request, created.error)

        failed = _publish(ctx, request, SyncEventKind.CREATE, obj, auth)
        if failed is not None:
            return failed
        return ReplyEnvelope.with_empty_data_area(request)


def handle_update(ctx: CommandContext, request: Envelope, auth: AuthUserId) -> ReplyEnvelope:
    with _timed(ctx, MessageAction.UPDATE):
        baseline_built = _build(ctx, request.payload.baseline_data, ctx.object_class, "BaselineData")
        if isinstance(baseline_built, Err):
            return _error_reply(ctx, request, baseline_built.error)
        new_built = _build(ctx, request.payload.new_data, ctx.object_class, "NewData")
        if isinstance(new_built, Err):
            return _error_reply(ctx, request, new_built.error)
        baseline, obj = baseline_built.value, new_built.value

        checked = attempt(
            lambda: ctx.checker.check(baseline, obj),
            MalformedRequestError,
            AmbiguousBaselineError,
            QueryFailedError,
            PoolExhaustedError,
        )
        if isinstance(checked, Err):
            return _error_reply(ctx, request, checked.error)
        rejection = checked.value.error(ctx.object_type)
        if rejection is not None:
            return _error_reply(ctx, request, rejection)

        updated = attempt(lambda: ctx.provider.update(obj), *_PROVIDER_FAILURES)
        if isinstance(updated, Err):
            return _error_reply(ctx, request, updated.error)
        obj.attach_baseline(baseline)

        failed = _publish(ctx, request, SyncEventKind.UPDATE, obj, auth)
        if failed is not None:
            return failed
        return ReplyEnvelope.with_empty_data_area(request)


def handle_delete(ctx: CommandContext, request: Envelope, auth: AuthUserId) -> ReplyEnvelope:
    with _timed(ctx, MessageAction.DELETE):
        built = _build(ctx, request.payload.delete_data, ctx.object_class, "DeleteData")
        if isinstance(built, Err):
            return _error_reply(ctx, request, built.error)
        obj = built.value

        deleted = attempt(lambda: ctx.provider.delete(obj), *_PROVIDER_FAILURES)
        if isinstance(deleted, Err):
            return _error_reply(ctx, request, deleted.error)

        failed = _publish(ctx, request, SyncEventKind.DELETE, obj, auth)
        if failed is not None:
            return failed
        return ReplyEnvelope.with_empty_data_area(request)


HANDLERS: dict[MessageAction, Handler] = {
    MessageAction.QUERY: handle_query,
    MessageAction.GENERATE: handle_generate,
    MessageAction.CREATE: handle_create,
    MessageAction.UPDATE: handle_update,
    MessageAction.DELETE: handle_delete,
}


__all__ = [
    "HANDLERS",
    "Handler",
    "handle_create",
    "handle_delete",
    "handle_generate",
    "handle_query",
    "handle_update",
]
