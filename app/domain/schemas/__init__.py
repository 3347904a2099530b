"""Domain schemas. Request/response and validation."""

from app.domain.schemas.comment import CommentEditRequest, CommentResponse
from app.domain.schemas.user import UserResponse, UserRoleChangeRequest

__all__ = [
    "CommentEditRequest",
    "CommentResponse",
    "UserResponse",
    "UserRoleChangeRequest",
]
