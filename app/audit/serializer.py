"""JSON rendering of request/response payloads for audit logs. Stateless."""

import dataclasses
import json
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from app.audit.exceptions import SerializationError

NONE_SENTINEL = "none"


def _to_jsonable(value: Any) -> Any:
    """json.dumps default hook. Raises TypeError for values with no JSON form."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    # Plain objects: public instance attributes, bean style
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict) and not callable(value):
        return {k: v for k, v in attrs.items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonSerializer:
    """
    serialize(value) -> JSON text. None renders as the sentinel.
    Unsupported or cyclic structures raise SerializationError.
    """

    def __init__(self, none_sentinel: str = NONE_SENTINEL) -> None:
        self._none_sentinel = none_sentinel

    def serialize(self, value: Any) -> str:
        if value is None:
            return self._none_sentinel
        try:
            return json.dumps(value, default=_to_jsonable, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"Cannot serialize {type(value).__name__}: {e}"
            ) from e
