# app/api/routers/users_admin.py

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_auth_user, get_user_service, require_admin
from app.api.routing import AuditedRoute
from app.application.user_service import UserService
from app.audit.registry import admin_api
from app.domain.models.user import AuthUser
from app.domain.schemas.user import UserResponse, UserRoleChangeRequest

router = APIRouter(route_class=AuditedRoute)


@router.patch("/users/{user_id}", response_model=UserResponse)
@admin_api(identity="auth_user", payload="body")
async def change_user_role(
    user_id: int,
    body: UserRoleChangeRequest,
    auth_user: Annotated[AuthUser, Depends(get_auth_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Change a user's role."""
    require_admin(auth_user)
    return await user_service.change_user_role(user_id, body, actor_id=auth_user.id)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    auth_user: Annotated[AuthUser, Depends(get_auth_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Read a user. Not audited."""
    require_admin(auth_user)
    return await user_service.get_user(user_id)
