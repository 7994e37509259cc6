"""
Database models for NoteVault.

SQLAlchemy ORM models for the async store:
    - Account: email/password account that owns notes
    - Note: owner-scoped note with ordered tags and an archive flag
    - NoteTag: one tag of a note at a fixed position
"""

from .account import Account, normalize_email
from .base import BaseModel
from .note import CONTENT_MAX_LENGTH, TAG_MAX_LENGTH, TITLE_MAX_LENGTH, Note, NoteTag

__all__ = [
    "BaseModel",
    "Account",
    "Note",
    "NoteTag",
    "normalize_email",
    "TITLE_MAX_LENGTH",
    "CONTENT_MAX_LENGTH",
    "TAG_MAX_LENGTH",
]
