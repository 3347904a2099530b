"""Immutable per-call audit models. No FastAPI."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple


@dataclass
class Invocation:
    """Dispatcher-side descriptor of one call: the target operation and its arguments."""

    operation: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def proceed(self) -> Any:
        """Call the operation with exactly the captured arguments."""
        return self.operation(*self.args, **self.kwargs)


@dataclass(frozen=True)
class InvocationContext:
    """
    Arguments in declaration order plus operation identity and request metadata.
    Created at interception time, discarded after logging.
    """

    operation_name: str
    owner_name: str
    arguments: Tuple[Tuple[str, Any], ...]
    http_method: str
    url: str

    @property
    def operation_identity(self) -> str:
        return f"{self.owner_name}.{self.operation_name}()"

    def argument(self, name: str) -> Any:
        for arg_name, value in self.arguments:
            if arg_name == name:
                return value
        return None


@dataclass(frozen=True)
class AuditRecord:
    """
    Start fields of one audit lifecycle. Fixed before the operation runs.
    """

    timestamp: str
    caller_id: str
    http_method: str
    url: str
    operation: str
    request_payload: str

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for JSON logging."""
        return {
            "timestamp": self.timestamp,
            "caller_id": self.caller_id,
            "http_method": self.http_method,
            "url": self.url,
            "operation": self.operation,
            "request_payload": self.request_payload,
        }


@dataclass(frozen=True)
class AuditOutcome:
    """End fields: response payload on success, error kind and message on failure."""

    succeeded: bool
    elapsed_ms: int
    response_payload: Optional[str] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.succeeded:
            return {
                "elapsed_ms": self.elapsed_ms,
                "response_payload": self.response_payload,
            }
        return {
            "elapsed_ms": self.elapsed_ms,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
        }
