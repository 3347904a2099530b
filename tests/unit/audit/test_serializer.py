"""Serializer tests: JSON round-trip of well-formed payloads, SerializationError on the rest."""

import json
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

import pytest

from app.audit.exceptions import SerializationError
from app.audit.serializer import JsonSerializer
from app.domain.models.user import AuthUser, UserRole
from app.domain.schemas.user import UserResponse


@pytest.fixture
def serializer():
    return JsonSerializer()


@dataclass
class Node:
    name: str
    child: object = None


class PlainDto:
    def __init__(self) -> None:
        self.title = "t"
        self.count = 2
        self._secret = "hidden"


def test_round_trip_of_nested_structure(serializer):
    payload = {"ids": [1, 2, 3], "meta": {"ok": True, "ratio": 0.5, "note": None}}
    assert json.loads(serializer.serialize(payload)) == payload


def test_pydantic_model(serializer):
    response = UserResponse(user_id=3, email="u@example.com", role=UserRole.ADMIN)
    assert json.loads(serializer.serialize(response)) == {
        "user_id": 3,
        "email": "u@example.com",
        "role": "ADMIN",
    }


def test_dataclass_enum_and_scalars(serializer):
    user = AuthUser(id=7, email="a@example.com", role=UserRole.USER)
    assert json.loads(serializer.serialize(user)) == {"id": 7, "email": "a@example.com", "role": "USER"}
    assert serializer.serialize(Decimal("1.50")) == '"1.50"'
    assert serializer.serialize(UUID(int=1)) == '"00000000-0000-0000-0000-000000000001"'
    assert serializer.serialize(datetime(2024, 1, 2, 3, 4, 5)) == '"2024-01-02T03:04:05"'


def test_plain_object_public_attributes(serializer):
    assert json.loads(serializer.serialize(PlainDto())) == {"title": "t", "count": 2}


def test_none_is_sentinel():
    assert JsonSerializer().serialize(None) == "none"
    assert JsonSerializer(none_sentinel="-").serialize(None) == "-"


def test_unicode_kept_readable(serializer):
    assert serializer.serialize({"name": "관리자"}) == '{"name": "관리자"}'


def test_cyclic_structure_raises(serializer):
    node = Node("root")
    node.child = node
    with pytest.raises(SerializationError):
        serializer.serialize(node)

    looped: list = []
    looped.append(looped)
    with pytest.raises(SerializationError):
        serializer.serialize(looped)


def test_unsupported_value_raises(serializer):
    with pytest.raises(SerializationError) as exc_info:
        serializer.serialize(object())
    assert "object" in exc_info.value.message
