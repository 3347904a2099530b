# Application layer: services that orchestrate domain state.

from app.application.comment_service import CommentService
from app.application.user_service import UserService

__all__ = [
    "CommentService",
    "UserService",
]
