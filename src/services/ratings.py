"""Rating aggregation - keeps a running average and count on each property."""

import math
from typing import Any
from src.models.property import Property
from src.services.store import MemoryStore
from src.utils.errors import NotFoundError, ValidationError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating: Any) -> float:
    """Coerce a submitted rating to float, raising ValidationError outside [1, 5]."""
    if rating is None or isinstance(rating, bool):
        raise ValidationError("Rating is required.", field="rating")

    if isinstance(rating, str):
        try:
            rating = float(rating.strip())
        except ValueError:
            raise ValidationError("Invalid rating. Must be a number.", field="rating")

    if not isinstance(rating, (int, float)) or math.isnan(rating):
        raise ValidationError("Invalid rating. Must be a number.", field="rating")

    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError(
            f"Invalid rating. Must be between {MIN_RATING} and {MAX_RATING}.",
            field="rating"
        )
    return float(rating)


def next_average(avg: float, count: int, rating: float) -> tuple[float, int]:
    """Fold one rating into a running mean."""
    new_count = count + 1
    return (avg * count + rating) / new_count, new_count


def rate_property(store: MemoryStore, property_id: int, rating: Any) -> Property:
    """
    Record one rating against a property and return the updated property.

    The read of the current aggregate and the write of the new one happen
    under the store lock, so simultaneous ratings are all counted.
    """
    value = validate_rating(rating)

    with store.lock:
        prop = store.get_property(property_id)
        if prop is None:
            raise NotFoundError(f"Property not found: {property_id}", field="property_id")

        avg_rating, rating_count = next_average(prop.avg_rating, prop.rating_count, value)
        updated = store.update_property(property_id, {
            "avg_rating": avg_rating,
            "rating_count": rating_count,
        })

    logger.info(
        "Property rated",
        property_id=property_id,
        rating=value,
        avg_rating=round(avg_rating, 4),
        rating_count=rating_count
    )
    return updated
