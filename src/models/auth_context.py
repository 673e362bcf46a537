"""Authenticated actor passed explicitly to operations that need one."""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticatedContext(BaseModel):
    """Identity of the user performing a request."""
    model_config = ConfigDict(frozen=True)

    user_id: int = Field(..., ge=1, description="Acting user ID")
    username: str = Field(..., description="Acting username")
