"""
Audit interceptor for admin operations. No FastAPI.

Wraps an operation, logs a start block (time, caller, method, URL, operation,
request payload), runs it, then logs an end block (elapsed ms plus response
payload, or error kind and message) and hands back the result or the failure
untouched.
"""

import functools
import inspect
import json
import logging
import numbers
import time
from datetime import datetime
from typing import Any, Callable, Optional

from starlette.background import BackgroundTasks
from starlette.requests import HTTPConnection, Request
from starlette.responses import Response

from app.audit.exceptions import SerializationError
from app.audit.models import AuditOutcome, AuditRecord, Invocation, InvocationContext
from app.audit.registry import AdminApiTags, admin_api_tags
from app.audit.serializer import NONE_SENTINEL, JsonSerializer
from app.core.context import current_request
from app.domain.models.user import AuthUser

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

EVENT_START = "admin_api_start"
EVENT_SUCCESS = "admin_api_success"
EVENT_FAILURE = "admin_api_failure"

# Request-scope objects the web framework hands to handlers; never a payload.
AMBIENT_TYPES: tuple[type, ...] = (HTTPConnection, Response, BackgroundTasks)
SCALAR_TYPES: tuple[type, ...] = (bool, numbers.Number, str, bytes)


def _bind_arguments(operation: Callable[..., Any], args: tuple, kwargs: dict) -> tuple:
    """(name, value) pairs in declaration order. Falls back to call order if the signature does not bind."""
    try:
        signature = inspect.signature(operation)
        bound = signature.bind_partial(*args, **kwargs)
    except (TypeError, ValueError):
        return tuple((f"arg{i}", v) for i, v in enumerate(args)) + tuple(kwargs.items())
    pairs = []
    for name, value in bound.arguments.items():
        kind = signature.parameters[name].kind
        if kind is inspect.Parameter.VAR_POSITIONAL:
            pairs.extend((f"{name}[{i}]", v) for i, v in enumerate(value))
        elif kind is inspect.Parameter.VAR_KEYWORD:
            pairs.extend(value.items())
        else:
            pairs.append((name, value))
    return tuple(pairs)


def _operation_names(operation: Callable[..., Any]) -> tuple[str, str]:
    """(owner, name): owner is the defining class, or the module for plain functions."""
    target = getattr(operation, "__func__", operation)
    qualname = getattr(target, "__qualname__", None) or getattr(target, "__name__", type(target).__name__)
    parts = [p for p in qualname.split(".") if p != "<locals>"]
    name = parts[-1]
    if len(parts) > 1:
        return parts[-2], name
    module = getattr(target, "__module__", None) or ""
    return module.rsplit(".", 1)[-1], name


class OperationAuditInterceptor:
    """
    intercept(invocation) -> result, for any operation taking arguments and returning or raising.

    One start block before the operation runs, one end block after it returns or
    raises. Arguments are never touched; results and exceptions pass through as-is.
    Logging is best-effort: a failure while building or emitting a block is reported
    as a warning and does not affect the call.
    """

    def __init__(
        self,
        logger: logging.Logger,
        serializer: Optional[JsonSerializer] = None,
        *,
        identity_type: type = AuthUser,
        skip_types: tuple[type, ...] = (),
        none_sentinel: str = NONE_SENTINEL,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        request_lookup: Callable[[], Request] = current_request,
        clock: Callable[[], float] = time.perf_counter,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._logger = logger
        self._serializer = serializer or JsonSerializer(none_sentinel=none_sentinel)
        self._identity_type = identity_type
        self._skip_types = (identity_type,) + AMBIENT_TYPES + tuple(skip_types)
        self._none = none_sentinel
        self._timestamp_format = timestamp_format
        self._request_lookup = request_lookup
        self._clock = clock
        self._now = now

    # ------------------------------------------------------------------
    # Interception
    # ------------------------------------------------------------------

    def intercept(self, invocation: Invocation) -> Any:
        request = self._request_lookup()
        record = self._log_start(invocation, request)
        started = self._clock()
        try:
            result = invocation.proceed()
        except BaseException as exc:
            self._log_failure(record, started, exc)
            raise
        self._log_success(record, started, result)
        return result

    async def intercept_async(self, invocation: Invocation) -> Any:
        """Same contract as intercept() for coroutine operations."""
        request = self._request_lookup()
        record = self._log_start(invocation, request)
        started = self._clock()
        try:
            result = await invocation.proceed()
        except BaseException as exc:
            self._log_failure(record, started, exc)
            raise
        self._log_success(record, started, result)
        return result

    def wrap(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Return func routed through the interceptor. Signature is preserved via functools.wraps."""
        if getattr(func, "__audited__", False):
            return func

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await self.intercept_async(Invocation(func, args, kwargs))

            async_wrapper.__audited__ = True
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return self.intercept(Invocation(func, args, kwargs))

        wrapper.__audited__ = True
        return wrapper

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------

    def build_context(self, invocation: Invocation, request: Request) -> InvocationContext:
        owner, name = _operation_names(invocation.operation)
        return InvocationContext(
            operation_name=name,
            owner_name=owner,
            arguments=_bind_arguments(invocation.operation, invocation.args, invocation.kwargs),
            http_method=request.method,
            url=request.url.path,
        )

    def extract_caller_id(self, context: InvocationContext, tags: Optional[AdminApiTags] = None) -> Optional[Any]:
        """Id of the declared identity argument, else of the first identity-typed argument."""
        if tags is not None and tags.identity:
            return getattr(context.argument(tags.identity), "id", None)
        for _, value in context.arguments:
            if isinstance(value, self._identity_type):
                return getattr(value, "id", None)
        return None

    def extract_payload(self, context: InvocationContext, tags: Optional[AdminApiTags] = None) -> Any:
        """
        The declared payload argument, else the first argument that is not None, not the
        caller identity, not a scalar and not request-scope metadata. Later candidates are
        not logged.
        """
        if tags is not None and tags.payload:
            return context.argument(tags.payload)
        for _, value in context.arguments:
            if value is None:
                continue
            if isinstance(value, self._skip_types) or isinstance(value, SCALAR_TYPES):
                continue
            return value
        return None

    def render(self, value: Any) -> str:
        """JSON text of value; on SerializationError, str(value) plus a warning."""
        if value is None:
            return self._none
        try:
            return self._serializer.serialize(value)
        except SerializationError as e:
            self._logger.warning("JSON serialization failed, using str(): %s", e.message)
            return str(value)

    # ------------------------------------------------------------------
    # Log blocks
    # ------------------------------------------------------------------

    def _log_start(self, invocation: Invocation, request: Request) -> Optional[AuditRecord]:
        try:
            context = self.build_context(invocation, request)
            tags = admin_api_tags(invocation.operation)
            caller_id = self.extract_caller_id(context, tags)
            if caller_id is None:
                self._logger.warning(
                    "No %s found in arguments of %s",
                    self._identity_type.__name__,
                    context.operation_identity,
                )
            record = AuditRecord(
                timestamp=self._now().strftime(self._timestamp_format),
                caller_id=self._none if caller_id is None else str(caller_id),
                http_method=context.http_method,
                url=context.url,
                operation=context.operation_identity,
                request_payload=self.render(self.extract_payload(context, tags)),
            )
            self._emit(logging.INFO, EVENT_START, record.to_dict())
            return record
        except Exception:
            self._logger.warning("Audit start block could not be logged", exc_info=True)
            return None

    def _log_success(self, record: Optional[AuditRecord], started: float, result: Any) -> None:
        try:
            outcome = AuditOutcome(
                succeeded=True,
                elapsed_ms=self._elapsed_ms(started),
                response_payload=self.render(result),
            )
            self._emit(logging.INFO, EVENT_SUCCESS, self._end_fields(record, outcome))
        except Exception:
            self._logger.warning("Audit success block could not be logged", exc_info=True)

    def _log_failure(self, record: Optional[AuditRecord], started: float, exc: BaseException) -> None:
        try:
            outcome = AuditOutcome(
                succeeded=False,
                elapsed_ms=self._elapsed_ms(started),
                error_kind=type(exc).__name__,
                error_message=str(exc),
            )
            self._emit(logging.ERROR, EVENT_FAILURE, self._end_fields(record, outcome))
        except Exception:
            self._logger.warning("Audit failure block could not be logged", exc_info=True)

    def _end_fields(self, record: Optional[AuditRecord], outcome: AuditOutcome) -> dict:
        fields = {}
        if record is not None:
            fields["operation"] = record.operation
            fields["caller_id"] = record.caller_id
            fields["http_method"] = record.http_method
            fields["url"] = record.url
        fields.update(outcome.to_dict())
        return fields

    def _elapsed_ms(self, started: float) -> int:
        return max(0, int((self._clock() - started) * 1000))

    def _emit(self, level: int, event: str, fields: dict) -> None:
        self._logger.log(level, json.dumps({"event": event, **fields}, ensure_ascii=False))
