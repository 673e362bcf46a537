"""Appointment model - a requested property viewing."""

from typing import Optional, Literal
from datetime import datetime
from pydantic import BaseModel, Field

from src.models.user import utc_now

AppointmentStatus = Literal["pending", "confirmed", "cancelled"]
APPOINTMENT_STATUSES = ("pending", "confirmed", "cancelled")


class Appointment(BaseModel):
    """Viewing request against a property."""
    id: int = Field(..., ge=1, description="Appointment ID (store-assigned)")
    property_id: int = Field(..., ge=1, description="Property ID (FK)")
    user_id: int = Field(..., ge=1, description="Requesting user ID (FK)")
    date: datetime = Field(..., description="Scheduled date and time")
    message: Optional[str] = Field(None, description="Note for the listing owner")
    status: AppointmentStatus = Field(
        default="pending",
        description="Status: pending, confirmed, cancelled"
    )
    created_at: datetime = Field(default_factory=utc_now)
