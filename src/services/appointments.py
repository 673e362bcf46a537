"""Viewing appointments against properties."""

from datetime import datetime, timezone
from typing import Optional, Union
from src.models.appointment import APPOINTMENT_STATUSES, Appointment
from src.models.auth_context import AuthenticatedContext
from src.services.store import MemoryStore
from src.utils.errors import AuthorizationError, NotFoundError, ValidationError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


def parse_appointment_date(value: Union[datetime, str, None]) -> datetime:
    """Accept a datetime or ISO-8601 text; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid appointment date: {value}", field="date")
    else:
        raise ValidationError("Appointment date is required", field="date")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def schedule_appointment(
    store: MemoryStore,
    ctx: AuthenticatedContext,
    property_id: int,
    date: Union[datetime, str],
    message: Optional[str] = None
) -> Appointment:
    """
    Request a viewing of a property.

    Slots are not checked for overlap; every requested time is accepted.
    """
    when = parse_appointment_date(date)
    if store.get_property(property_id) is None:
        raise NotFoundError(f"Property not found: {property_id}", field="property_id")

    appointment = store.create_appointment({
        "property_id": property_id,
        "user_id": ctx.user_id,
        "date": when,
        "message": message.strip() if message and message.strip() else None,
    })
    logger.info(
        "Appointment scheduled",
        appointment_id=appointment.id,
        property_id=property_id,
        user_id=ctx.user_id,
        scheduled_for=when.isoformat()
    )
    return appointment


def list_user_appointments(store: MemoryStore, ctx: AuthenticatedContext) -> list[Appointment]:
    return store.list_appointments_by_user(ctx.user_id)


def list_property_appointments(store: MemoryStore, ctx: AuthenticatedContext, property_id: int) -> list[Appointment]:
    """Viewings booked against a property; only its owner may list them."""
    prop = store.get_property(property_id)
    if prop is None:
        raise NotFoundError(f"Property not found: {property_id}", field="property_id")
    if prop.user_id != ctx.user_id:
        raise AuthorizationError(f"Not authorized to view appointments for property {property_id}")
    return store.list_appointments_by_property(property_id)


def set_appointment_status(
    store: MemoryStore,
    ctx: AuthenticatedContext,
    appointment_id: int,
    status: str
) -> Appointment:
    """Change an appointment's status. Only the requesting user may do so."""
    if status not in APPOINTMENT_STATUSES:
        raise ValidationError(
            f"Invalid status: {status}. Must be one of {', '.join(APPOINTMENT_STATUSES)}",
            field="status"
        )

    with store.lock:
        appointment = store.get_appointment(appointment_id)
        if appointment is None:
            raise NotFoundError(f"Appointment not found: {appointment_id}", field="appointment_id")
        if appointment.user_id != ctx.user_id:
            raise AuthorizationError(f"Not authorized to modify appointment {appointment_id}")
        updated = store.update_appointment(appointment_id, {"status": status})

    logger.info(
        "Appointment status changed",
        appointment_id=appointment_id,
        from_status=appointment.status,
        to_status=status
    )
    return updated
