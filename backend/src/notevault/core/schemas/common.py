"""
Shared response schemas - pagination, errors etc
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationMeta(CamelModel):
    """Page info returned alongside a listing."""

    current_page: int
    total_pages: int
    total_notes: int
    has_next: bool
    has_prev: bool

    @classmethod
    def create(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        # ceil(total / limit); zero matches means zero pages and no neighbours
        pages = (total + limit - 1) // limit

        return cls(
            current_page=page,
            total_pages=pages,
            total_notes=total,
            has_next=page < pages,
            has_prev=total > 0 and page > 1,
        )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(default=None, description="Additional error details")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Unauthorized",
                "message": "Authorization header is missing",
            }
        }
    )


class MessageResponse(BaseModel):
    """Plain success acknowledgement."""

    success: bool = Field(default=True, description="Operation success status")
    message: str = Field(description="Success message")


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
