"""Domain layer: models, schemas, exceptions. Pure business logic only."""

from app.domain.exceptions import (
    CommentNotFoundError,
    DomainError,
    InvalidRoleChangeError,
    NotFoundError,
    UserNotFoundError,
)
from app.domain.models import AuthUser, Comment, User, UserRole
from app.domain.schemas import (
    CommentEditRequest,
    CommentResponse,
    UserResponse,
    UserRoleChangeRequest,
)

__all__ = [
    "AuthUser",
    "Comment",
    "CommentEditRequest",
    "CommentResponse",
    "CommentNotFoundError",
    "DomainError",
    "InvalidRoleChangeError",
    "NotFoundError",
    "User",
    "UserNotFoundError",
    "UserResponse",
    "UserRole",
    "UserRoleChangeRequest",
]
