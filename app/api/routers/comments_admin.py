# app/api/routers/comments_admin.py

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_auth_user, get_comment_service, require_admin
from app.api.routing import AuditedRoute
from app.application.comment_service import CommentService
from app.audit.registry import admin_api
from app.domain.models.user import AuthUser
from app.domain.schemas.comment import CommentEditRequest, CommentResponse

router = APIRouter(route_class=AuditedRoute)


# Audited through settings.admin_operations, not the marker.
@router.delete("/comments/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: int,
    auth_user: Annotated[AuthUser, Depends(get_auth_user)],
    comment_service: Annotated[CommentService, Depends(get_comment_service)],
):
    """Delete a comment (moderation)."""
    require_admin(auth_user)
    await comment_service.delete_comment(comment_id)
    return None


# Plain def: FastAPI runs it in the threadpool.
@router.put("/comments/{comment_id}", response_model=CommentResponse)
@admin_api(identity="auth_user", payload="body")
def edit_comment(
    comment_id: int,
    body: CommentEditRequest,
    auth_user: Annotated[AuthUser, Depends(get_auth_user)],
    comment_service: Annotated[CommentService, Depends(get_comment_service)],
):
    """Replace a comment's contents (moderation)."""
    require_admin(auth_user)
    return comment_service.edit_comment(comment_id, body)
