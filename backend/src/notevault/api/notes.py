"""Notes API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import NoteVaultError
from ..core.query import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from ..core.schemas.common import MessageResponse
from ..core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_account
from ..security import TokenPayload

router = APIRouter(prefix="/notes", tags=["notes"])


def parse_note_id(note_id: str) -> UUID:
    try:
        return UUID(note_id)
    except ValueError:
        raise NoteVaultError.validation("Invalid note ID format", "id") from None


@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note owned by the caller."""
    note_service = NoteService(session)
    return await note_service.create_note(identity.account_id, request)


@router.get("/", response_model=NoteListResponse)
async def list_notes(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    search: Optional[str] = Query(None, description="Search in title and content"),
    tags: Optional[str] = Query(None, description="Comma-separated tags, any of which may match"),
    archived: Optional[bool] = Query(None, description="Filter by archive status"),
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes with filtering, search and pagination."""
    note_service = NoteService(session)
    return await note_service.list_notes(
        owner_id=identity.account_id,
        page=page,
        limit=limit,
        search=search,
        tags=tags,
        archived=archived,
    )


@router.get("/tags/", response_model=List[str])
async def get_available_tags(
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """Get all tags used on the caller's notes."""
    note_service = NoteService(session)
    return await note_service.get_available_tags(identity.account_id)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(parse_note_id(note_id), identity.account_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note; only the fields sent are changed."""
    note_service = NoteService(session)
    return await note_service.update_note(parse_note_id(note_id), identity.account_id, request)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: str,
    identity: TokenPayload = Depends(get_current_account),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(parse_note_id(note_id), identity.account_id)
    return MessageResponse(message="Note deleted successfully")
