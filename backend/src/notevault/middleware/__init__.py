"""Middleware for authentication and other cross-cutting concerns."""

from .auth import (
    AccountBearer,
    get_current_account,
    get_optional_account,
    get_token_service,
    optional_account,
    require_account,
)

__all__ = [
    "AccountBearer",
    "get_current_account",
    "get_optional_account",
    "get_token_service",
    "optional_account",
    "require_account",
]
