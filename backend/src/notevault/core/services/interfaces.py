"""
Service interfaces for NoteVault.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..schemas.auth import AccountResponse, AuthResponse, LoginRequest, RegisterRequest
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for account management."""

    @abstractmethod
    async def register_account(self, request: RegisterRequest) -> AuthResponse:
        """Register new account and issue its first token."""
        pass

    @abstractmethod
    async def authenticate(self, request: LoginRequest) -> AuthResponse:
        """Check email/password and issue a token."""
        pass

    @abstractmethod
    async def get_profile(self, account_id: UUID) -> AccountResponse:
        """Get account by ID."""
        pass


class INoteService(ABC):
    """Note service for owner-scoped CRUD operations."""

    @abstractmethod
    async def create_note(self, owner_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, owner_id: UUID) -> NoteResponse:
        """Get one of the caller's notes."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, owner_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Partially update one of the caller's notes."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, owner_id: UUID) -> None:
        """Delete one of the caller's notes."""
        pass

    @abstractmethod
    async def list_notes(
        self,
        owner_id: UUID,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        tags: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> NoteListResponse:
        """List the caller's notes with filters and pagination."""
        pass

    @abstractmethod
    async def get_available_tags(self, owner_id: UUID) -> List[str]:
        """Distinct tags on the caller's notes."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connectivity."""
        pass
