"""Note repository for database operations.

Every read and write that targets a single note is matched on ``id`` and
``owner_id`` together, so "missing" and "someone else's" look the same.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.note import Note, NoteTag
from ..query import ScopedNoteQuery

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict, tags: List[str]) -> Note:
        """Create new note with its tags."""
        note = Note(**note_data)
        note.set_tags(tags)
        self.session.add(note)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return note

    async def get_by_id_and_owner(
        self, note_id: UUID, owner_id: UUID, for_update: bool = False
    ) -> Optional[Note]:
        """Get note by ID if owned by the account."""
        stmt = select(Note).where(Note.id == note_id, Note.owner_id == owner_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(
        self,
        note_id: UUID,
        owner_id: UUID,
        update_data: dict,
        tags: Optional[List[str]] = None,
    ) -> Optional[Note]:
        """Apply changes to a note owned by the account; None when nothing matched."""
        try:
            note = await self.get_by_id_and_owner(note_id, owner_id, for_update=True)
            if not note:
                return None

            for key, value in update_data.items():
                setattr(note, key, value)
            if tags is not None:
                note.set_tags(tags)
            note.updated_at = utcnow()

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return note

    async def delete_note(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete note if owned by the account."""
        try:
            note = await self.get_by_id_and_owner(note_id, owner_id, for_update=True)
            if not note:
                return False

            await self.session.delete(note)
            await self.session.commit()
        except Exception:
            logger.error(f"Unexpected error deleting note {note_id}", exc_info=True)
            await self.session.rollback()
            raise

        logger.debug(f"Deleted note {note_id}")
        return True

    async def count(self, query: ScopedNoteQuery) -> int:
        stmt = select(func.count(Note.id)).where(query.where_clause)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_page(self, query: ScopedNoteQuery) -> Tuple[List[Note], int]:
        """Run a scoped listing query; returns one page plus the total match count."""
        total = await self.count(query)
        if total == 0:
            return [], 0

        stmt = (
            select(Note)
            .where(query.where_clause)
            .order_by(*query.order_by)
            .offset(query.page.offset)
            .limit(query.page.limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_owner_tags(self, owner_id: UUID) -> List[str]:
        """All distinct tag names used on the account's notes."""
        stmt = (
            select(NoteTag.name)
            .join(Note, Note.id == NoteTag.note_id)
            .where(Note.owner_id == owner_id)
            .distinct()
            .order_by(NoteTag.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
