"""Comment application service. Moderation over an in-memory store."""

import logging
import threading

from app.domain.exceptions import CommentNotFoundError
from app.domain.models.comment import Comment
from app.domain.schemas.comment import CommentEditRequest, CommentResponse


class CommentService:
    def __init__(self, logger: logging.Logger, comments: list[Comment] | None = None) -> None:
        self._logger = logger
        self._lock = threading.Lock()
        self._comments: dict[int, Comment] = {c.comment_id: c for c in (comments or [])}

    def add(self, comment: Comment) -> None:
        with self._lock:
            self._comments[comment.comment_id] = comment

    def exists(self, comment_id: int) -> bool:
        with self._lock:
            return comment_id in self._comments

    async def delete_comment(self, comment_id: int) -> None:
        """Remove a comment. Raises CommentNotFoundError if absent."""
        with self._lock:
            if self._comments.pop(comment_id, None) is None:
                raise CommentNotFoundError(f"Comment not found: id={comment_id}")
        self._logger.info("Comment %s deleted", comment_id)

    def edit_comment(self, comment_id: int, request: CommentEditRequest) -> CommentResponse:
        """Replace a comment's contents. Blocking; FastAPI runs the calling handler in its threadpool."""
        with self._lock:
            comment = self._comments.get(comment_id)
            if comment is None:
                raise CommentNotFoundError(f"Comment not found: id={comment_id}")
            comment.contents = request.contents
        self._logger.info("Comment %s edited", comment_id)
        return CommentResponse.model_validate(comment)
