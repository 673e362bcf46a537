"""Saved-properties management - a user's favorites stored as a JSON list of IDs."""

import json
from typing import Any, Optional, Union
from src.models.auth_context import AuthenticatedContext
from src.models.property import Property
from src.models.user import User
from src.services.store import MemoryStore
from src.utils.errors import NotFoundError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


def parse_saved_properties(raw: Any) -> list[int]:
    """
    Decode a stored favorites list.

    Malformed payloads decode to an empty list rather than failing the
    request that touched them.
    """
    if raw is None or raw == "":
        return []

    if isinstance(raw, (bytes, str)):
        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Malformed saved_properties, treating as empty", error=str(e))
            return []
    else:
        decoded = raw

    if not isinstance(decoded, list):
        logger.warning(
            "saved_properties is not a list, treating as empty",
            payload_type=type(decoded).__name__
        )
        return []

    if not all(isinstance(item, int) and not isinstance(item, bool) for item in decoded):
        logger.warning("saved_properties holds non-integer IDs, treating as empty")
        return []

    return decoded


def serialize_saved_properties(property_ids: list[int]) -> str:
    return json.dumps(list(property_ids))


def _user_id(actor: Union[AuthenticatedContext, int]) -> int:
    if isinstance(actor, AuthenticatedContext):
        return actor.user_id
    return actor


def set_favorite(
    store: MemoryStore,
    actor: Union[AuthenticatedContext, int],
    property_id: int,
    add: bool
) -> User:
    """
    Add or remove a property from the user's saved set and return the user.

    Adding an already-saved ID and removing an absent one are both no-ops.
    Adding requires the property to exist; removing does not, so stale IDs
    can always be cleaned up.
    """
    user_id = _user_id(actor)

    with store.lock:
        user = store.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}", field="user_id")

        if add and store.get_property(property_id) is None:
            raise NotFoundError(f"Property not found: {property_id}", field="property_id")

        saved = parse_saved_properties(user.saved_properties)
        if add:
            if property_id in saved:
                return user
            saved.append(property_id)
        else:
            if property_id not in saved:
                return user
            saved = [pid for pid in saved if pid != property_id]

        updated = store.update_user(user_id, {
            "saved_properties": serialize_saved_properties(saved)
        })

    logger.info(
        "Saved properties updated",
        user_id=user_id,
        property_id=property_id,
        action="add" if add else "remove",
        saved_count=len(saved)
    )
    return updated


def get_saved_properties(store: MemoryStore, actor: Union[AuthenticatedContext, int]) -> list[Property]:
    """Resolve the user's saved IDs to properties, skipping deleted ones."""
    user_id = _user_id(actor)
    user = store.get_user(user_id)
    if user is None:
        raise NotFoundError(f"User not found: {user_id}", field="user_id")

    properties: list[Property] = []
    for property_id in parse_saved_properties(user.saved_properties):
        prop: Optional[Property] = store.get_property(property_id)
        if prop is not None:
            properties.append(prop)
    return properties
