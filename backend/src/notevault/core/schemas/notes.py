"""
Note management schemas.

These schemas define the API contracts for note CRUD operations and listings.
Tags are only length-checked here; trimming and dropping empty tags happens
in the service before anything is stored.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..models.note import CONTENT_MAX_LENGTH, TAG_MAX_LENGTH, TITLE_MAX_LENGTH
from .common import CamelModel, PaginationMeta


def _check_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title is required")
    if len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
    return v


def _check_content(v: str) -> str:
    if len(v.strip()) == 0:
        raise ValueError("Content is required")
    if len(v) > CONTENT_MAX_LENGTH:
        raise ValueError(f"Content cannot exceed {CONTENT_MAX_LENGTH} characters")
    return v


def _check_tags(v: List[str]) -> List[str]:
    for tag in v:
        if len(tag.strip()) > TAG_MAX_LENGTH:
            raise ValueError(f"Tag cannot exceed {TAG_MAX_LENGTH} characters")
    return v


class NoteCreate(CamelModel):
    """Note creation request schema.

    Unknown fields (an ``ownerId`` for instance) are ignored; the owner always
    comes from the authenticated identity.
    """

    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    tags: List[str] = Field(default_factory=list, description="Note tags")
    is_archived: bool = Field(default=False, description="Archive status")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _check_title(v)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _check_content(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        return _check_tags(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting Notes - Q4 Planning",
                "content": "Review Q3 performance, set Q4 objectives",
                "tags": ["meeting", "planning"],
            }
        }
    )


class NoteUpdate(CamelModel):
    """Note update request schema; only the fields sent are changed."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")
    tags: Optional[List[str]] = Field(default=None, description="Note tags")
    is_archived: Optional[bool] = Field(default=None, description="Archive status")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _check_title(v) if v is not None else v

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _check_content(v) if v is not None else v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        return _check_tags(v) if v is not None else v

    def provided_fields(self) -> dict:
        """Fields present in the request body with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class NoteResponse(CamelModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    tags: List[str] = Field(description="Note tags")
    is_archived: bool = Field(description="Archive status")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(CamelModel):
    """Paginated note list response."""

    notes: List[NoteResponse]
    pagination: PaginationMeta
