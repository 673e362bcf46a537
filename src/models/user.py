"""User model - registered account with a serialized favorites list."""

from datetime import datetime, timezone
from pydantic import BaseModel, EmailStr, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """Registered user."""
    id: int = Field(..., ge=1, description="User ID (store-assigned)")
    username: str = Field(..., min_length=1, description="Unique login name")
    password_hash: str = Field(..., description="PBKDF2 hash, never exposed")
    email: EmailStr = Field(..., description="Unique email address")
    full_name: str = Field(..., description="Display name")
    saved_properties: str = Field(
        default="[]",
        description="JSON-encoded list of saved property IDs"
    )
    created_at: datetime = Field(default_factory=utc_now)


class RegisterRequest(BaseModel):
    """Registration payload."""
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    email: EmailStr
    full_name: str = Field(..., min_length=1)
