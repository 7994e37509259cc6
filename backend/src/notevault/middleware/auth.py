"""Authentication middleware.

``AccountBearer`` turns a raw request into the verified token payload of an
existing account. With ``auto_error=True`` any credential failure rejects the
request with 401 before the endpoint runs. With ``auto_error=False`` the same
failures are intentionally ignored and the request continues unauthenticated;
endpoints using it work with or without a session.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ErrorKind, NoteVaultError
from ..core.repositories.account_repository import AccountRepository
from ..database import get_db_session
from ..security import TokenPayload, TokenService, extract_bearer_token

logger = logging.getLogger(__name__)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


class AccountBearer(HTTPBearer):
    """Bearer token authentication backed by the account store."""

    def __init__(self, auto_error: bool = True):
        super(AccountBearer, self).__init__(auto_error=auto_error, bearerFormat="JWT")

    async def __call__(
        self,
        request: Request,
        session: AsyncSession = Depends(get_db_session),
    ) -> Optional[TokenPayload]:
        try:
            return await self.authenticate(request, session)
        except NoteVaultError as e:
            if not e.is_credential_error:
                raise
            if self.auto_error:
                logger.info(
                    "Rejected request credentials",
                    extra={"kind": e.kind.value, "path": request.url.path},
                )
                raise
            logger.debug(
                "Continuing without session",
                extra={"kind": e.kind.value, "path": request.url.path},
            )
            return None

    async def authenticate(self, request: Request, session: AsyncSession) -> TokenPayload:
        token = extract_bearer_token(request.headers.get("Authorization"))
        payload = get_token_service(request).verify(token)

        if not await AccountRepository(session).exists(payload.account_id):
            raise NoteVaultError(ErrorKind.ACCOUNT_NOT_FOUND, "User not found")

        return payload


require_account = AccountBearer()
optional_account = AccountBearer(auto_error=False)


# Dependency for getting the authenticated identity from the bearer token
async def get_current_account(
    identity: TokenPayload = Depends(require_account),
) -> TokenPayload:
    """Get the authenticated identity; the request is rejected without one."""
    return identity


async def get_optional_account(
    identity: Optional[TokenPayload] = Depends(optional_account),
) -> Optional[TokenPayload]:
    """Get the authenticated identity if the request carries a usable one."""
    return identity
