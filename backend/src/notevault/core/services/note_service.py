"""Note service implementation."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import NoteVaultError
from ..models.note import Note
from ..query import DEFAULT_LIMIT, DEFAULT_PAGE, NoteQueryBuilder, sanitize_tags
from ..repositories.note_repository import NoteRepository
from ..schemas.common import PaginationMeta
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = logging.getLogger(__name__)

NOTE_NOT_FOUND_MESSAGE = "Note not found"


class NoteService(INoteService):
    """Note service implementation.

    Every operation takes the owner id of the authenticated caller. Single-note
    operations are matched on (id, owner) in one store call, and a miss is
    always reported as NOT_FOUND_OR_FORBIDDEN whether the note is absent or
    belongs to somebody else.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, owner_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        note_data = {
            "title": request.title,
            "content": request.content,
            "is_archived": request.is_archived,
            "owner_id": owner_id,
        }
        note = await self.note_repo.create_note(note_data, sanitize_tags(request.tags))
        logger.debug(f"Created note {note.id} for account {owner_id}")
        return self._note_to_response(note)

    async def get_note(self, note_id: UUID, owner_id: UUID) -> NoteResponse:
        """Get note by ID."""
        note = await self.note_repo.get_by_id_and_owner(note_id, owner_id)
        if not note:
            raise NoteVaultError.not_found_or_forbidden(NOTE_NOT_FOUND_MESSAGE)
        return self._note_to_response(note)

    async def update_note(self, note_id: UUID, owner_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note with only the fields the caller sent."""
        changes = request.provided_fields()
        if not changes:
            raise NoteVaultError.validation("No updates provided")

        tags = changes.pop("tags", None)
        if tags is not None:
            tags = sanitize_tags(tags)

        note = await self.note_repo.update_note(note_id, owner_id, changes, tags=tags)
        if not note:
            raise NoteVaultError.not_found_or_forbidden(NOTE_NOT_FOUND_MESSAGE)
        return self._note_to_response(note)

    async def delete_note(self, note_id: UUID, owner_id: UUID) -> None:
        """Delete note."""
        deleted = await self.note_repo.delete_note(note_id, owner_id)
        if not deleted:
            raise NoteVaultError.not_found_or_forbidden(NOTE_NOT_FOUND_MESSAGE)

    async def list_notes(
        self,
        owner_id: UUID,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: Optional[str] = None,
        tags: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> NoteListResponse:
        """List the owner's notes with filtering and pagination."""
        query = NoteQueryBuilder(owner_id).build(
            page=page, limit=limit, search=search, tags=tags, archived=archived
        )
        notes, total = await self.note_repo.find_page(query)

        return NoteListResponse(
            notes=[self._note_to_response(note) for note in notes],
            pagination=PaginationMeta.create(total=total, page=page, limit=limit),
        )

    async def get_available_tags(self, owner_id: UUID) -> List[str]:
        """Get all tags used on the owner's notes."""
        return await self.note_repo.get_owner_tags(owner_id)

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            tags=note.tags,
            is_archived=note.is_archived,
            owner_id=note.owner_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
