"""User application service. Role administration over an in-memory store."""

import logging
import threading

from app.domain.exceptions import InvalidRoleChangeError, UserNotFoundError
from app.domain.models.user import User, UserRole
from app.domain.schemas.user import UserResponse, UserRoleChangeRequest


class UserService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI.
    Store is a dict keyed by user_id guarded by a lock.
    """

    def __init__(self, logger: logging.Logger, users: list[User] | None = None) -> None:
        self._logger = logger
        self._lock = threading.Lock()
        self._users: dict[int, User] = {u.user_id: u for u in (users or [])}

    def add(self, user: User) -> None:
        with self._lock:
            self._users[user.user_id] = user

    async def get_user(self, user_id: int) -> UserResponse:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(f"User not found: id={user_id}")
        return UserResponse.model_validate(user)

    async def change_user_role(
        self,
        user_id: int,
        request: UserRoleChangeRequest,
        actor_id: int | None = None,
    ) -> UserResponse:
        """Change role. An admin may not demote itself."""
        new_role = UserRole(request.role)
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(f"User not found: id={user_id}")
            if actor_id == user_id and user.role is UserRole.ADMIN and new_role is not UserRole.ADMIN:
                raise InvalidRoleChangeError("Admins cannot remove their own admin role")
            user.role = new_role
        self._logger.info("User %s role changed to %s", user_id, new_role.value)
        return UserResponse.model_validate(user)
