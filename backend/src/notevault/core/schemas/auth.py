"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
bearer token handed back to the client.
"""

import re
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...security.password import MIN_PASSWORD_LENGTH
from ..models.account import normalize_email
from .common import CamelModel

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DISPLAY_NAME_MAX_LENGTH = 50


def _check_email(v: str) -> str:
    v = normalize_email(v)
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Please enter a valid email")
    return v


class RegisterRequest(BaseModel):
    """Account registration request schema."""

    email: str = Field(max_length=254, description="Account email address")
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=128, description="Password")
    name: str = Field(description="Display name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return _check_email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        if len(v) > DISPLAY_NAME_MAX_LENGTH:
            raise ValueError(f"Name cannot exceed {DISPLAY_NAME_MAX_LENGTH} characters")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@example.com",
                "password": "password123",
                "name": "John Doe",
            }
        }
    )


class LoginRequest(BaseModel):
    """Login request schema."""

    email: str = Field(max_length=254, description="Account email address")
    password: str = Field(max_length=128, description="Password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return normalize_email(v)


class AccountResponse(CamelModel):
    """Public account information."""

    id: uuid.UUID = Field(description="Account unique identifier")
    email: str = Field(description="Account email address")
    display_name: str = Field(description="Display name")
    created_at: datetime = Field(description="Account creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class AuthResponse(CamelModel):
    """Account plus a freshly issued bearer token."""

    user: AccountResponse
    token: str = Field(description="JWT bearer token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")


class SessionResponse(CamelModel):
    """Whether the request carried a usable session, and whose."""

    authenticated: bool
    user: Optional[AccountResponse] = None
