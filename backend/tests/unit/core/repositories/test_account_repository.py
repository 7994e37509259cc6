"""Unit tests for AccountRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from notevault.core.repositories.account_repository import AccountRepository


@pytest.fixture
def repo(test_session):
    return AccountRepository(test_session)


async def test_create_stores_lowercase_email(repo):
    account = await repo.create_account(
        {"email": "Mixed@Example.com", "display_name": "Mixed", "password_hash": "h"}
    )
    assert account.email == "mixed@example.com"
    assert account.id is not None
    assert account.created_at is not None


async def test_get_by_email_ignores_case(repo, test_account):
    found = await repo.get_by_email("  OWNER@example.COM ")
    assert found is not None
    assert found.id == test_account.id


async def test_get_by_id(repo, test_account):
    assert (await repo.get_by_id(test_account.id)).email == test_account.email
    assert await repo.get_by_id(uuid4()) is None


async def test_exists(repo, test_account):
    assert await repo.exists(test_account.id) is True
    assert await repo.exists(uuid4()) is False


async def test_is_email_taken(repo, test_account):
    assert await repo.is_email_taken("owner@example.com") is True
    assert await repo.is_email_taken("nobody@example.com") is False


async def test_duplicate_email_raises(repo, test_account):
    account_id = test_account.id

    with pytest.raises(IntegrityError):
        await repo.create_account(
            {"email": "OWNER@example.com", "display_name": "Dup", "password_hash": "h"}
        )

    # session is usable again after the rollback
    assert await repo.exists(account_id) is True
