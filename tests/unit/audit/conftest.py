"""Fixtures for audit unit tests: mock logger sink, fixed request scope, deterministic clocks."""

import logging
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from app.audit.interceptor import OperationAuditInterceptor

from audit_helpers import make_request


@pytest.fixture
def audit_sink():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def fixed_request():
    return make_request()


@pytest.fixture
def interceptor(audit_sink, fixed_request):
    ticks = iter([10.0, 10.05])
    return OperationAuditInterceptor(
        logger=audit_sink,
        request_lookup=lambda: fixed_request,
        clock=lambda: next(ticks),
        now=lambda: datetime(2024, 5, 1, 12, 30, 15),
    )
