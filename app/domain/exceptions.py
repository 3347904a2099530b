"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class UserNotFoundError(NotFoundError):
    """Raised when no user exists for the given id."""


class CommentNotFoundError(NotFoundError):
    """Raised when no comment exists for the given id."""


class InvalidRoleChangeError(DomainError):
    """Raised when a role change is not allowed (e.g. admin demoting itself)."""
