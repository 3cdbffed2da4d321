"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from stockroom.application.ports import VerifiedToken
from stockroom.domain.exceptions import ExpiredCredentials, MalformedCredentials
from stockroom.interfaces.api.app import create_app

from tests.conftest import make_user


class FakeTokenVerifier:
    """Treats the bearer token as the subject; two tokens are reserved."""

    def verify(self, token: str) -> VerifiedToken:
        if token == "expired":
            raise ExpiredCredentials("Token has expired")
        if token == "garbage":
            raise MalformedCredentials("Invalid token")
        return VerifiedToken(subject=token)


class RecordingAuditSink:
    def __init__(self) -> None:
        self.records = []

    async def record(self, principal, operation, details) -> None:
        self.records.append((principal.user_id, operation))


def bearer(subject: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {subject}"}


@pytest.fixture
def accounts(catalog):
    """One admin, a manager and staff in store S1, staff in S2, a disabled user."""
    catalog.users.add(make_user("admin-1", "admin"))
    catalog.users.add(make_user("mgr-1", "manager", store_id="S1"))
    catalog.users.add(make_user("staff-1", "staff", store_id="S1"))
    catalog.users.add(make_user("staff-2", "staff", store_id="S2"))
    catalog.users.add(make_user("disabled-1", "staff", is_active=False, store_id="S1"))
    return catalog


@pytest.fixture
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture
def app(accounts, uow_factory, audit_sink):
    """Falcon ASGI app over the in-memory catalog."""
    return create_app(uow_factory, FakeTokenVerifier(), audit_sink)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
