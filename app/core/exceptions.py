"""Core exceptions. Typed, no HTTP."""


class RequestScopeError(RuntimeError):
    """Raised when request metadata is looked up outside an active request scope."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
