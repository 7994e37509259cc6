"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import AccountResponse, AuthResponse, LoginRequest, RegisterRequest, SessionResponse
from .common import CamelModel, ErrorResponse, HealthStatus, MessageResponse, PaginationMeta
from .notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "AccountResponse",
    "AuthResponse",
    "SessionResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListResponse",
    # Common schemas
    "CamelModel",
    "PaginationMeta",
    "ErrorResponse",
    "MessageResponse",
    "HealthStatus",
]
