"""Authentication service implementation."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import TokenService, hash_password, needs_update, verify_password
from ..errors import ErrorKind, NoteVaultError
from ..models.account import Account
from ..repositories.account_repository import AccountRepository
from ..schemas.auth import AccountResponse, AuthResponse, LoginRequest, RegisterRequest
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User already exists with this email"
INVALID_LOGIN_MESSAGE = "Invalid email or password"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, token_service: TokenService):
        self.session = session
        self.account_repo = AccountRepository(session)
        self.token_service = token_service

    async def register_account(self, request: RegisterRequest) -> AuthResponse:
        """Register new account."""
        if await self.account_repo.is_email_taken(request.email):
            raise NoteVaultError.conflict(DUPLICATE_EMAIL_MESSAGE)

        account_data = {
            "email": request.email,
            "display_name": request.name,
            "password_hash": hash_password(request.password),
        }

        try:
            account = await self.account_repo.create_account(account_data)
        except IntegrityError as e:
            # lost a race with a concurrent registration for the same email
            raise NoteVaultError.conflict(DUPLICATE_EMAIL_MESSAGE) from e

        logger.info(f"Registered account {account.id}")
        return self._auth_response(account)

    async def authenticate(self, request: LoginRequest) -> AuthResponse:
        """Login and return a bearer token."""
        account = await self.account_repo.get_by_email(request.email)
        if not account or not verify_password(request.password, account.password_hash):
            raise NoteVaultError(ErrorKind.INVALID_LOGIN, INVALID_LOGIN_MESSAGE)

        if needs_update(account.password_hash):
            await self.account_repo.update_password_hash(account, hash_password(request.password))

        return self._auth_response(account)

    async def get_profile(self, account_id: UUID) -> AccountResponse:
        """Get account by ID."""
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise NoteVaultError(ErrorKind.ACCOUNT_NOT_FOUND, "Account not found")
        return self.account_to_response(account)

    def _auth_response(self, account: Account) -> AuthResponse:
        return AuthResponse(
            user=self.account_to_response(account),
            token=self.token_service.issue(account),
            token_type="bearer",
            expires_in=self.token_service.expires_in,
        )

    @staticmethod
    def account_to_response(account: Account) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            email=account.email,
            display_name=account.display_name,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
