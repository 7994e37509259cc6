"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from notevault.config import Settings
from notevault.core.repositories.account_repository import AccountRepository
from notevault.database import Database
from notevault.main import create_app
from notevault.security import TokenService, hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "password123"


@pytest.fixture
def test_settings():
    """Settings for testing using a SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        log_level="WARNING",
    )


@pytest.fixture
def token_service(test_settings):
    return TokenService.from_settings(test_settings)


@pytest.fixture
async def database(test_settings):
    """Fresh in-memory database with all tables for one test."""
    db = Database.from_settings(test_settings)
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def test_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
async def test_account(test_session):
    """Create a test account in the database."""
    repo = AccountRepository(test_session)
    return await repo.create_account(
        {
            "email": "owner@example.com",
            "display_name": "Owner",
            "password_hash": hash_password(TEST_PASSWORD),
        }
    )


@pytest.fixture
async def other_account(test_session):
    repo = AccountRepository(test_session)
    return await repo.create_account(
        {
            "email": "other@example.com",
            "display_name": "Other",
            "password_hash": hash_password(TEST_PASSWORD),
        }
    )


@pytest.fixture
def test_app(test_settings):
    """Application wired to its own in-memory database."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app):
    """Test client; entering it runs the lifespan, which creates the tables."""
    with TestClient(test_app) as test_client:
        yield test_client


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_account(client):
    """Register an account through the API and return the response body."""

    def _register(email: str, name: str = "Test User") -> Dict:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": TEST_PASSWORD, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register_account):
    """Authorization headers for a freshly registered account."""
    body = register_account("alice@example.com", "Alice")
    return bearer(body["token"])
