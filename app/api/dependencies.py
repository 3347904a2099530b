"""FastAPI dependency injection: caller identity, services, audit interceptor and registry."""

import logging
from typing import Annotated, Optional

from fastapi import Header, HTTPException

from app.application.comment_service import CommentService
from app.application.user_service import UserService
from app.audit.interceptor import OperationAuditInterceptor
from app.audit.registry import AdminOperationRegistry
from app.audit.serializer import JsonSerializer
from app.config.settings import get_settings
from app.domain.models.comment import Comment
from app.domain.models.user import AuthUser, User, UserRole

_user_service: UserService | None = None
_comment_service: CommentService | None = None
_interceptor: OperationAuditInterceptor | None = None
_registry: AdminOperationRegistry | None = None


def get_user_service() -> UserService:
    """Return singleton user service, seeded with a default admin."""
    global _user_service
    if _user_service is None:
        _user_service = UserService(
            logger=logging.getLogger("app.application.user_service"),
            users=[User(user_id=1, email="admin@example.com", role=UserRole.ADMIN)],
        )
    return _user_service


def get_comment_service() -> CommentService:
    """Return singleton comment service."""
    global _comment_service
    if _comment_service is None:
        _comment_service = CommentService(
            logger=logging.getLogger("app.application.comment_service"),
            comments=[Comment(comment_id=1, todo_id=1, author_id=1, contents="first")],
        )
    return _comment_service


def get_admin_registry() -> AdminOperationRegistry:
    """Return singleton registry built from settings.admin_operations."""
    global _registry
    if _registry is None:
        _registry = AdminOperationRegistry(get_settings().admin_operations)
    return _registry


def get_audit_interceptor() -> OperationAuditInterceptor:
    """Return singleton interceptor writing to the configured audit logger."""
    global _interceptor
    if _interceptor is None:
        settings = get_settings()
        _interceptor = OperationAuditInterceptor(
            logger=logging.getLogger(settings.audit_logger_name),
            serializer=JsonSerializer(none_sentinel=settings.audit_none_sentinel),
            skip_types=(UserService, CommentService),
            none_sentinel=settings.audit_none_sentinel,
            timestamp_format=settings.audit_timestamp_format,
        )
    return _interceptor


def get_auth_user(
    x_user_id: Annotated[Optional[str], Header(alias="X-User-ID")] = None,
    x_user_email: Annotated[Optional[str], Header(alias="X-User-Email")] = None,
    x_user_role: Annotated[Optional[str], Header(alias="X-User-Role")] = None,
) -> AuthUser:
    """
    Resolve the caller from identity headers set by the upstream gateway.
    Authentication happens upstream; missing or malformed headers are rejected with 401.
    """
    if not x_user_id or not x_user_id.strip().isdigit():
        raise HTTPException(status_code=401, detail="X-User-ID header is required")
    try:
        role = UserRole((x_user_role or UserRole.USER.value).strip().upper())
    except ValueError:
        raise HTTPException(status_code=401, detail="X-User-Role is not a known role")
    return AuthUser(id=int(x_user_id.strip()), email=(x_user_email or "").strip(), role=role)


def require_admin(auth_user: AuthUser) -> None:
    if auth_user.role is not UserRole.ADMIN:
        raise HTTPException(status_code=403, detail="Admin role required")
