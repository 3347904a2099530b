"""APIRoute that wraps admin endpoints with the audit interceptor at route construction."""

from typing import Any, Callable

from fastapi.routing import APIRoute

from app.api.dependencies import get_admin_registry, get_audit_interceptor


class AuditedRoute(APIRoute):
    """
    Endpoints selected by the registry (@admin_api marker or listed signature)
    are replaced by an intercepted wrapper before FastAPI analyses the signature.
    """

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs: Any) -> None:
        if get_admin_registry().is_admin(endpoint):
            endpoint = get_audit_interceptor().wrap(endpoint)
        super().__init__(path, endpoint, **kwargs)
