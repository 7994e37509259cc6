"""
Error taxonomy shared by every layer of NoteVault.

Components raise ``NoteVaultError`` carrying an explicit ``ErrorKind``; the API
boundary decides the HTTP status and how much of the message is exposed.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Every failure a NoteVault component can report."""

    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_CREDENTIAL = "malformed_credential"
    INVALID_SIGNATURE_OR_MALFORMED = "invalid_signature_or_malformed"
    EXPIRED = "expired"
    WRONG_ISSUER = "wrong_issuer"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_LOGIN = "invalid_login"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND_OR_FORBIDDEN = "not_found_or_forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"


# Failures of the credential stage (extraction, verification, account lookup)
CREDENTIAL_KINDS = frozenset(
    {
        ErrorKind.MISSING_CREDENTIAL,
        ErrorKind.MALFORMED_CREDENTIAL,
        ErrorKind.INVALID_SIGNATURE_OR_MALFORMED,
        ErrorKind.EXPIRED,
        ErrorKind.WRONG_ISSUER,
        ErrorKind.ACCOUNT_NOT_FOUND,
        ErrorKind.INVALID_LOGIN,
    }
)


class NoteVaultError(Exception):
    """Application error tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    def __repr__(self) -> str:
        return f"<NoteVaultError(kind={self.kind.value}, message={self.message!r})>"

    @property
    def is_credential_error(self) -> bool:
        return self.kind in CREDENTIAL_KINDS

    @classmethod
    def validation(cls, message: str, field: Optional[str] = None) -> "NoteVaultError":
        details = {"field": field} if field else None
        return cls(ErrorKind.VALIDATION_ERROR, message, details)

    @classmethod
    def not_found_or_forbidden(cls, message: str = "Note not found") -> "NoteVaultError":
        return cls(ErrorKind.NOT_FOUND_OR_FORBIDDEN, message)

    @classmethod
    def conflict(cls, message: str) -> "NoteVaultError":
        return cls(ErrorKind.CONFLICT, message)
