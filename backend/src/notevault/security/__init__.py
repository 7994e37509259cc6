"""Security utilities."""

from .jwt import (
    BEARER_PREFIX,
    DEFAULT_TOKEN_TTL,
    TokenPayload,
    TokenService,
    extract_bearer_token,
)
from .password import MIN_PASSWORD_LENGTH, hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "MIN_PASSWORD_LENGTH",
    "BEARER_PREFIX",
    "DEFAULT_TOKEN_TTL",
    "TokenPayload",
    "TokenService",
    "extract_bearer_token",
]
