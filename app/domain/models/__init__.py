"""Domain models. Pure business entities."""

from app.domain.models.comment import Comment
from app.domain.models.user import AuthUser, User, UserRole

__all__ = [
    "AuthUser",
    "Comment",
    "User",
    "UserRole",
]
