"""
Account model for authentication.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from .base import BaseModel

if TYPE_CHECKING:
    from .note import Note


def normalize_email(email: str) -> str:
    """Emails are stored and compared trimmed and lowercase."""
    return email.strip().lower()


class Account(BaseModel):
    """Account with email/password login."""

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(String(254), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(50), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    __table_args__ = (
        CheckConstraint("email = lower(email)", name="ck_accounts_email_lowercase"),
        CheckConstraint("length(display_name) <= 50", name="ck_accounts_display_name_len"),
    )

    def __repr__(self) -> str:
        return f"<Account(email='{self.email}')>"

    @validates("email")
    def _normalize_email(self, key, value):
        return normalize_email(value)
