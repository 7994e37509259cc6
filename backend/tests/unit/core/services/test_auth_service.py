"""Unit tests for AuthService."""

from uuid import uuid4

import pytest

from notevault.core.errors import ErrorKind, NoteVaultError
from notevault.core.schemas.auth import LoginRequest, RegisterRequest
from notevault.core.services.auth_service import AuthService


@pytest.fixture
def service(test_session, token_service):
    return AuthService(test_session, token_service)


async def test_register_issues_token_for_stored_account(service, token_service):
    response = await service.register_account(
        RegisterRequest(email="A@X.com", password="secret1", name="Alice")
    )

    assert response.user.email == "a@x.com"
    assert response.token_type == "bearer"
    assert response.expires_in == token_service.expires_in

    payload = token_service.verify(response.token)
    assert payload.account_id == response.user.id
    assert payload.email == "a@x.com"
    assert payload.display_name == "Alice"


async def test_register_duplicate_email(service, test_account):
    with pytest.raises(NoteVaultError) as exc_info:
        await service.register_account(
            RegisterRequest(email="OWNER@example.com", password="secret1", name="Dup")
        )

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.message == "User already exists with this email"


async def test_login(service, test_account):
    response = await service.authenticate(
        LoginRequest(email="owner@example.com", password="password123")
    )
    assert response.user.id == test_account.id


async def test_login_wrong_password(service, test_account):
    with pytest.raises(NoteVaultError) as exc_info:
        await service.authenticate(LoginRequest(email="owner@example.com", password="nope"))
    assert exc_info.value.kind is ErrorKind.INVALID_LOGIN


async def test_login_unknown_email(service):
    with pytest.raises(NoteVaultError) as exc_info:
        await service.authenticate(LoginRequest(email="ghost@example.com", password="x"))
    assert exc_info.value.kind is ErrorKind.INVALID_LOGIN
    assert exc_info.value.message == "Invalid email or password"


async def test_get_profile(service, test_account):
    profile = await service.get_profile(test_account.id)
    assert profile.email == "owner@example.com"
    assert profile.display_name == "Owner"


async def test_get_profile_missing(service):
    with pytest.raises(NoteVaultError) as exc_info:
        await service.get_profile(uuid4())
    assert exc_info.value.kind is ErrorKind.ACCOUNT_NOT_FOUND
