# Note model for user content
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .account import Account

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10000
TAG_MAX_LENGTH = 30


class Note(BaseModel):
    """Note owned by exactly one account."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # owner reference, fixed at creation
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    )

    owner: Mapped["Account"] = relationship("Account", back_populates="notes", lazy="raise")

    # ordered tag list, position keeps the order the client sent
    tag_links: Mapped[List["NoteTag"]] = relationship(
        "NoteTag",
        back_populates="note",
        order_by="NoteTag.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        Index("idx_notes_owner_archived", "owner_id", "is_archived"),
        CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_notes_title_len"),
        CheckConstraint(f"length(content) <= {CONTENT_MAX_LENGTH}", name="ck_notes_content_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    @property
    def tags(self) -> List[str]:
        """Tag names in their stored order."""
        return [link.name for link in self.tag_links]

    def set_tags(self, names: List[str]) -> None:
        """Replace the tag list; names are expected to be sanitized already."""
        self.tag_links = [NoteTag(name=name, position=i) for i, name in enumerate(names)]


class NoteTag(BaseModel):
    """One tag of a note, at a fixed position."""

    __tablename__ = "note_tags"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(TAG_MAX_LENGTH), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    note: Mapped["Note"] = relationship("Note", back_populates="tag_links", lazy="raise")

    __table_args__ = (
        Index("idx_note_tags_name", "name"),
        Index("idx_note_tags_note_id", "note_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteTag(note_id={self.note_id}, name='{self.name}')>"
