"""Selection of admin operations: @admin_api marker and explicit signature list. No FastAPI."""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

ADMIN_API_ATTR = "__admin_api__"


@dataclass(frozen=True)
class AdminApiTags:
    """
    Optional explicit tags for an admin operation.
    identity / payload name the parameters holding the caller and the loggable body;
    when unset the interceptor scans the arguments.
    """

    identity: Optional[str] = None
    payload: Optional[str] = None


def admin_api(
    func: Optional[Callable[..., Any]] = None,
    *,
    identity: Optional[str] = None,
    payload: Optional[str] = None,
):
    """
    Mark a handler as an admin operation. Usable bare (@admin_api) or with tags
    (@admin_api(identity="auth_user", payload="body")). Does not wrap the function.
    """

    def mark(f: Callable[..., Any]) -> Callable[..., Any]:
        setattr(f, ADMIN_API_ATTR, AdminApiTags(identity=identity, payload=payload))
        return f

    if func is not None:
        return mark(func)
    return mark


def admin_api_tags(func: Callable[..., Any]) -> Optional[AdminApiTags]:
    """Return the marker tags of func (or of the function it wraps), None when unmarked."""
    target = getattr(func, "__func__", func)
    while target is not None:
        tags = getattr(target, ADMIN_API_ATTR, None)
        if isinstance(tags, AdminApiTags):
            return tags
        target = getattr(target, "__wrapped__", None)
    return None


def qualified_name(func: Callable[..., Any]) -> str:
    """module.qualname of a function or bound method."""
    target = getattr(func, "__func__", func)
    module = getattr(target, "__module__", None) or ""
    qualname = getattr(target, "__qualname__", None) or getattr(target, "__name__", repr(target))
    return f"{module}.{qualname}" if module else qualname


class AdminOperationRegistry:
    """
    Explicit list of fully-qualified operation names, plus the @admin_api marker.
    Either one selects an operation for auditing; both lead to the same interceptor.
    """

    def __init__(self, signatures: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._signatures: set[str] = {s.strip() for s in signatures if s and s.strip()}

    def register(self, signature: str) -> None:
        """Add a fully-qualified operation name (module.qualname) at startup."""
        if not signature or not signature.strip():
            raise ValueError("signature must be a non-empty fully-qualified name")
        with self._lock:
            self._signatures.add(signature.strip())

    @property
    def signatures(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._signatures)

    def is_listed(self, func: Callable[..., Any]) -> bool:
        with self._lock:
            return qualified_name(func) in self._signatures

    def is_admin(self, func: Callable[..., Any]) -> bool:
        return admin_api_tags(func) is not None or self.is_listed(func)
