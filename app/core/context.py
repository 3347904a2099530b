# app/core/context.py

import contextvars

from starlette.requests import Request

from app.core.exceptions import RequestScopeError

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
request_ctx: contextvars.ContextVar[Request | None] = contextvars.ContextVar("request", default=None)


def current_request() -> Request:
    """Return the request bound to the current scope. Raises RequestScopeError outside a request."""
    request = request_ctx.get()
    if request is None:
        raise RequestScopeError("No request scope is active for the current call")
    return request
