"""Authentication API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import (
    AccountResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    SessionResponse,
)
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_account, get_optional_account, get_token_service
from ..security import TokenPayload, TokenService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Register a new account and get its first token."""
    auth_service = AuthService(session, token_service)
    return await auth_service.register_account(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Login with email and password."""
    auth_service = AuthService(session, token_service)
    return await auth_service.authenticate(request)


@router.get("/profile", response_model=AccountResponse)
async def get_profile(
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Get current account profile."""
    auth_service = AuthService(session, token_service)
    return await auth_service.get_profile(identity.account_id)


@router.get("/session", response_model=SessionResponse)
async def get_session(
    identity: Optional[TokenPayload] = Depends(get_optional_account),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Describe the caller's session; works with or without a token."""
    if identity is None:
        return SessionResponse(authenticated=False)

    auth_service = AuthService(session, token_service)
    user = await auth_service.get_profile(identity.account_id)
    return SessionResponse(authenticated=True, user=user)
