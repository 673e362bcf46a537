"""Listing management - create, update and delete properties owned by the acting user."""

from typing import Any
from pydantic import ValidationError as PydanticValidationError
from src.models.auth_context import AuthenticatedContext
from src.models.property import Property, PropertyBase
from src.services.store import MemoryStore
from src.utils.errors import AuthorizationError, NotFoundError, ValidationError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

# Only the store or the rating service may set these.
PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at", "avg_rating", "rating_count"})


def ensure_owner(ctx: AuthenticatedContext, prop: Property) -> None:
    """Raise AuthorizationError unless ctx owns prop."""
    if prop.user_id != ctx.user_id:
        logger.warning(
            "Ownership check failed",
            property_id=prop.id,
            owner_id=prop.user_id,
            actor_id=ctx.user_id
        )
        raise AuthorizationError(f"Not authorized to modify property {prop.id}")


def _get_owned(store: MemoryStore, ctx: AuthenticatedContext, property_id: int) -> Property:
    prop = store.get_property(property_id)
    if prop is None:
        raise NotFoundError(f"Property not found: {property_id}", field="property_id")
    ensure_owner(ctx, prop)
    return prop


def create_listing(store: MemoryStore, ctx: AuthenticatedContext, data: dict[str, Any]) -> Property:
    """Validate listing fields and store a property owned by ctx."""
    try:
        listing = PropertyBase.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)

    prop = store.create_property({**listing.model_dump(), "user_id": ctx.user_id})
    logger.info(
        "Listing created",
        property_id=prop.id,
        owner_id=ctx.user_id,
        listing_type=prop.listing_type,
        city=prop.city
    )
    return prop


def update_listing(
    store: MemoryStore,
    ctx: AuthenticatedContext,
    property_id: int,
    updates: dict[str, Any]
) -> Property:
    """Apply a partial update to a property owned by ctx."""
    changes = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}

    with store.lock:
        _get_owned(store, ctx, property_id)
        try:
            updated = store.update_property(property_id, changes)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

    logger.info(
        "Listing updated",
        property_id=property_id,
        owner_id=ctx.user_id,
        changed_fields=sorted(changes)
    )
    return updated


def delete_listing(store: MemoryStore, ctx: AuthenticatedContext, property_id: int) -> None:
    """Remove a property owned by ctx."""
    with store.lock:
        _get_owned(store, ctx, property_id)
        store.delete_property(property_id)

    logger.info("Listing deleted", property_id=property_id, owner_id=ctx.user_id)
