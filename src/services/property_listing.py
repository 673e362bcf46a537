"""Sort, search, group and map-bounds utilities over an already-fetched property list."""

from datetime import datetime, timezone
from typing import Callable, Optional, Union
from src.models.property import Property
from src.models.property_filter import MapBounds
from src.utils.formatters import format_days_ago
from src.utils.logging import get_structured_logger, sanitize_text, timed

logger = get_structured_logger(__name__)


def _created_ts(prop: Property) -> float:
    created = prop.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.timestamp()


# sort key -> (key function, descending)
SORT_ORDERS: dict[str, tuple[Callable[[Property], object], bool]] = {
    "price_low": (lambda p: p.price, False),
    "price_high": (lambda p: p.price, True),
    "newest": (_created_ts, True),
    "oldest": (_created_ts, False),
    "beds_high": (lambda p: p.bedrooms, True),
    "beds_low": (lambda p: p.bedrooms, False),
    "baths_high": (lambda p: p.bathrooms, True),
    "baths_low": (lambda p: p.bathrooms, False),
    "sqft_high": (lambda p: p.square_feet, True),
    "sqft_low": (lambda p: p.square_feet, False),
}

SEARCH_FIELDS = (
    "title",
    "description",
    "address",
    "city",
    "state",
    "zip_code",
    "property_type",
)


@timed("sort_properties")
def sort_properties(properties: list[Property], sort_key: Optional[str]) -> list[Property]:
    """
    Return a new list ordered by sort_key.

    Equal keys keep their input order in both directions. An unrecognized
    key returns a copy of the input unchanged.
    """
    if not properties:
        return []

    order = SORT_ORDERS.get(sort_key) if isinstance(sort_key, str) else None
    if order is None:
        if sort_key:
            logger.debug("Unknown sort key, keeping input order", sort_key=repr(sort_key)[:80])
        return list(properties)

    key_func, descending = order
    # sorted(reverse=True) preserves the original order of equal elements
    return sorted(properties, key=key_func, reverse=descending)


def search_properties(properties: list[Property], query: Optional[str]) -> list[Property]:
    """Case-insensitive substring search across the listing's text fields."""
    if not isinstance(query, str) or not query.strip():
        return properties

    needle = query.strip().lower()
    results = [
        p for p in properties
        if any(needle in str(getattr(p, field)).lower() for field in SEARCH_FIELDS)
    ]
    logger.debug(
        "Properties searched",
        query=sanitize_text(needle, max_length=80),
        candidates=len(properties),
        matched=len(results)
    )
    return results


def group_properties(properties: list[Property], field: str) -> dict[str, list[Property]]:
    """
    Partition properties by the string form of one of their fields.

    A field the model does not have reads as None, so everything lands in
    a single "None" group.
    """
    known = isinstance(field, str) and field in Property.model_fields
    if not known:
        logger.debug("Grouping by unknown field", field_name=sanitize_text(str(field), max_length=80))

    groups: dict[str, list[Property]] = {}
    for prop in properties:
        key = str(getattr(prop, field)) if known else "None"
        groups.setdefault(key, []).append(prop)
    return groups


def properties_in_bounds(
    properties: list[Property],
    bounds: Union[MapBounds, dict]
) -> list[Property]:
    """Properties whose coordinates fall inside an inclusive map box."""
    if not isinstance(bounds, MapBounds):
        bounds = MapBounds(**bounds)

    return [
        p for p in properties
        if bounds.south <= float(p.lat) <= bounds.north
        and bounds.west <= float(p.lng) <= bounds.east
    ]


def days_since_listed(prop: Property, now: Optional[datetime] = None) -> int:
    """Whole days between the listing's creation and now."""
    now = now or datetime.now(timezone.utc)
    created = prop.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return max((now - created).days, 0)


def listed_label(prop: Property, now: Optional[datetime] = None) -> str:
    """Human-readable listing age, e.g. "3 days ago"."""
    return format_days_ago(days_since_listed(prop, now))
