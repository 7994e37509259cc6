"""JWT token utilities."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import Settings
from ..core.errors import ErrorKind, NoteVaultError

BEARER_PREFIX = "Bearer "

# Used when the settings leave the token lifetime unset
DEFAULT_TOKEN_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class TokenPayload:
    """Identity claims carried by a bearer token."""

    account_id: UUID
    email: str
    display_name: str


class TokenService:
    """Issues and verifies signed, time-bounded bearer tokens.

    Tokens are HS256 JWTs carrying ``sub`` (account id), ``email`` and ``name``
    plus ``iat``/``exp`` and a fixed ``iss``. There is no revocation list: a
    token stays valid until it expires.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "notes-api",
        expires_delta: Optional[timedelta] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.expires_delta = expires_delta or DEFAULT_TOKEN_TTL

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        expires_delta = None
        if settings.access_token_expire_minutes:
            expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            issuer=settings.token_issuer,
            expires_delta=expires_delta,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.expires_delta.total_seconds())

    def issue(self, account, expires_delta: Optional[timedelta] = None) -> str:
        """Create a token for an account (anything with id, email, display_name)."""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)
        to_encode: Dict[str, Any] = {
            "sub": str(account.id),
            "email": account.email,
            "name": account.display_name,
            "iss": self.issuer,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """Decode and validate a token.

        Raises NoteVaultError with kind EXPIRED, WRONG_ISSUER or
        INVALID_SIGNATURE_OR_MALFORMED.
        """
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
            )
        except ExpiredSignatureError as e:
            raise NoteVaultError(ErrorKind.EXPIRED, "Token has expired") from e
        except JWTError as e:
            raise NoteVaultError(ErrorKind.INVALID_SIGNATURE_OR_MALFORMED, "Invalid token") from e

        if claims.get("iss") != self.issuer:
            raise NoteVaultError(ErrorKind.WRONG_ISSUER, "Token issuer mismatch")

        return self._payload_from_claims(claims)

    @staticmethod
    def _payload_from_claims(claims: Dict[str, Any]) -> TokenPayload:
        sub = claims.get("sub")
        email = claims.get("email")
        name = claims.get("name")
        if not sub or not isinstance(email, str) or not isinstance(name, str):
            raise NoteVaultError(ErrorKind.INVALID_SIGNATURE_OR_MALFORMED, "Invalid token")
        try:
            account_id = UUID(sub)
        except (TypeError, ValueError) as e:
            raise NoteVaultError(ErrorKind.INVALID_SIGNATURE_OR_MALFORMED, "Invalid token") from e
        return TokenPayload(account_id=account_id, email=email, display_name=name)


def extract_bearer_token(header_value: Optional[str]) -> str:
    """Pull the raw token out of an ``Authorization`` header value."""
    if header_value is None:
        raise NoteVaultError(ErrorKind.MISSING_CREDENTIAL, "Authorization header is missing")

    if not header_value.startswith(BEARER_PREFIX):
        raise NoteVaultError(ErrorKind.MALFORMED_CREDENTIAL, "Invalid authorization header format")

    token = header_value[len(BEARER_PREFIX):].strip()
    if not token:
        raise NoteVaultError(ErrorKind.MISSING_CREDENTIAL, "Token is missing")

    return token
