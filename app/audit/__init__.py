"""Audit: admin operation interception, payload serialization, operation selection. No FastAPI."""

from app.audit.exceptions import AuditError, SerializationError
from app.audit.interceptor import OperationAuditInterceptor
from app.audit.models import AuditOutcome, AuditRecord, Invocation, InvocationContext
from app.audit.registry import AdminApiTags, AdminOperationRegistry, admin_api
from app.audit.serializer import JsonSerializer

__all__ = [
    "AdminApiTags",
    "AdminOperationRegistry",
    "AuditError",
    "AuditOutcome",
    "AuditRecord",
    "Invocation",
    "InvocationContext",
    "JsonSerializer",
    "OperationAuditInterceptor",
    "SerializationError",
    "admin_api",
]
