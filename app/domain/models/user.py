"""Domain model for users and the authenticated caller. Pure business semantics, no infrastructure."""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


@dataclass(frozen=True)
class AuthUser:
    """
    Authenticated caller resolved for the current request.
    Passed to handlers as an argument; the audit interceptor reads its id.
    """

    id: int
    email: str
    role: UserRole


@dataclass
class User:
    user_id: int
    email: str
    role: UserRole
