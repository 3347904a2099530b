"""Fixtures for API unit tests: fresh in-memory services, AsyncClient, identity headers."""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.comment_service import CommentService
from app.application.user_service import UserService
from app.domain.models.comment import Comment
from app.domain.models.user import User, UserRole
from app.main import app


@pytest.fixture
def user_service():
    return UserService(
        logger=logging.getLogger("test.user_service"),
        users=[
            User(user_id=1, email="admin@example.com", role=UserRole.ADMIN),
            User(user_id=2, email="member@example.com", role=UserRole.USER),
        ],
    )


@pytest.fixture
def comment_service():
    return CommentService(
        logger=logging.getLogger("test.comment_service"),
        comments=[Comment(comment_id=5, todo_id=1, author_id=2, contents="spam")],
    )


@pytest.fixture
def app_with_overrides(user_service, comment_service):
    """App with in-memory services replaced per test."""
    from app.api import dependencies

    app.dependency_overrides[dependencies.get_user_service] = lambda: user_service
    app.dependency_overrides[dependencies.get_comment_service] = lambda: comment_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers():
    return {"X-User-ID": "1", "X-User-Email": "admin@example.com", "X-User-Role": "ADMIN"}
