"""
Owner-scoped query construction for note listings.

``NoteQueryBuilder`` turns the optional listing parameters into SQLAlchemy
conditions. The owner constraint is always the first condition and no other
parameter can widen or remove it.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.sql.elements import ColumnElement

from .errors import NoteVaultError
from .models.note import Note, NoteTag

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

LIKE_ESCAPE = "\\"


def sanitize_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Trim every tag and drop the empty ones, keeping order."""
    if not tags:
        return []
    cleaned = []
    for tag in tags:
        if tag is None:
            continue
        tag = tag.strip()
        if tag:
            cleaned.append(tag)
    return cleaned


def parse_tag_filter(raw: Optional[str]) -> List[str]:
    """Split a comma-separated ``tags`` parameter into clean tag names."""
    if raw is None:
        return []
    return sanitize_tags(raw.split(","))


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user text only matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ScopedNoteQuery:
    """Predicate, ordering and page window for one listing request."""

    owner_id: UUID
    conditions: Tuple[ColumnElement, ...]
    page: PageRequest

    @property
    def where_clause(self) -> ColumnElement:
        return and_(*self.conditions)

    @property
    def order_by(self) -> tuple:
        # newest first; id breaks ties so repeated queries give the same order
        return (Note.created_at.desc(), Note.id.desc())


class NoteQueryBuilder:
    """Builds owner-scoped note queries for one authenticated account."""

    def __init__(self, owner_id: UUID):
        if owner_id is None:
            raise ValueError("owner_id is required to build a note query")
        self.owner_id = owner_id

    def build(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: Optional[str] = None,
        tags: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> ScopedNoteQuery:
        if page < 1:
            raise NoteVaultError.validation("page must be greater than or equal to 1", "page")
        if limit < 1 or limit > MAX_LIMIT:
            raise NoteVaultError.validation(f"limit must be between 1 and {MAX_LIMIT}", "limit")

        conditions: List[ColumnElement] = [Note.owner_id == self.owner_id]

        if archived is not None:
            conditions.append(Note.is_archived == archived)

        tag_names = parse_tag_filter(tags)
        if tag_names:
            conditions.append(self._any_tag_condition(tag_names))

        terms = search.split() if search else []
        if terms:
            conditions.append(self._text_condition(terms))

        return ScopedNoteQuery(
            owner_id=self.owner_id,
            conditions=tuple(conditions),
            page=PageRequest(page=page, limit=limit),
        )

    @staticmethod
    def _any_tag_condition(tag_names: List[str]) -> ColumnElement:
        tagged = select(NoteTag.note_id).where(NoteTag.name.in_(tag_names))
        return Note.id.in_(tagged)

    @staticmethod
    def _text_condition(terms: List[str]) -> ColumnElement:
        # a note matches when any term appears in its title or content
        clauses = []
        for term in terms:
            pattern = f"%{escape_like(term)}%"
            clauses.append(Note.title.ilike(pattern, escape=LIKE_ESCAPE))
            clauses.append(Note.content.ilike(pattern, escape=LIKE_ESCAPE))
        return or_(*clauses)
