"""Audit-layer exceptions. Typed, no HTTP."""


class AuditError(Exception):
    """Base for all audit-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SerializationError(AuditError):
    """Raised when a payload cannot be rendered as JSON (unsupported type, cyclic structure)."""
