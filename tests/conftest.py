import pytest
from fastapi.testclient import TestClient

from app.core.auth import create_access_token
from app.core.config import settings
from app.main import app
from app.services.ledger_service import Ledger

ADMIN = "admin"
HOST = "0xA11CE"
GUEST = "0xB0B"
OTHER = "0xCAFE"


@pytest.fixture
def ledger() -> Ledger:
    """Fresh ledger with ADMIN as administrator."""
    return Ledger(ADMIN)


@pytest.fixture
def registered_ledger(ledger) -> Ledger:
    """Ledger with HOST registered as host and GUEST as guest."""
    assert ledger.register_host(HOST)
    assert ledger.register_guest(GUEST)
    return ledger


@pytest.fixture
def test_client(monkeypatch):
    """Fixture for FastAPI test client with a fresh ledger per test."""
    monkeypatch.setattr(settings, "ADMIN_IDENTITY", ADMIN)

    # Use TestClient with context manager to trigger lifespan
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers():
    """Build bearer headers for an identity."""
    def _headers(identity: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(identity)}"}
    return _headers
