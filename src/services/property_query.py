"""Property query engine - narrows the store's properties with a parsed filter."""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union
from src.models.property import Property
from src.models.property_filter import PropertyFilter
from src.services.store import MemoryStore
from src.utils.logging import get_structured_logger, log_timing

logger = get_structured_logger(__name__)

# Query-string key -> PropertyFilter field. snake_case keys are accepted as-is.
FILTER_KEY_ALIASES = {
    "city": "city",
    "minPrice": "min_price",
    "maxPrice": "max_price",
    "minBeds": "min_beds",
    "minBaths": "min_baths",
    "propertyType": "property_type",
    "listingType": "listing_type",
    "minSqft": "min_sqft",
    "maxSqft": "max_sqft",
    "minYear": "min_year",
    "maxYear": "max_year",
}

_DECIMAL_FIELDS = {"min_price", "max_price"}
_INT_FIELDS = {"min_beds", "min_baths", "min_sqft", "max_sqft", "min_year", "max_year"}
_TEXT_FIELDS = {"city", "property_type", "listing_type"}

ANY_PROPERTY_TYPE = "Any"

# Filter bounds beyond this many integer digits match nothing sensible.
MAX_FILTER_DIGITS = 18


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse a number or numeric text, returning None when it is not a finite, in-range number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
    else:
        return None

    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite() or number.adjusted() >= MAX_FILTER_DIGITS:
        return None
    return number


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer, truncating fractional input such as "2.5"."""
    number = parse_decimal(value)
    if number is None:
        return None
    return int(number)


def first_value(value: Any) -> Any:
    # Multi-valued query params arrive as lists.
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_property_filter(raw: Optional[Mapping[str, Any]]) -> PropertyFilter:
    """
    Build a PropertyFilter from loosely-typed request parameters.

    Never raises: blank, unknown or unparsable values are dropped so the
    query narrows less instead of failing.
    """
    if not raw:
        return PropertyFilter()

    parsed: dict[str, Any] = {}
    dropped: list[str] = []

    for key, value in raw.items():
        field = FILTER_KEY_ALIASES.get(key, key)
        value = first_value(value)

        if field in _DECIMAL_FIELDS:
            result = parse_decimal(value)
        elif field in _INT_FIELDS:
            result = parse_int(value)
        elif field in _TEXT_FIELDS:
            result = value.strip() if isinstance(value, str) else None
            result = result or None
        else:
            continue

        if result is None:
            blank = value is None or (isinstance(value, str) and not value.strip())
            if not blank:
                dropped.append(key)
            continue
        parsed[field] = result

    if parsed.get("property_type") == ANY_PROPERTY_TYPE:
        del parsed["property_type"]

    if dropped:
        logger.debug("Ignored unparsable filter values", fields=dropped)

    return PropertyFilter(**parsed)


def matches_filter(prop: Property, filters: PropertyFilter) -> bool:
    """True when prop satisfies every constraint set on filters."""
    if filters.city is not None and filters.city.lower() not in prop.city.lower():
        return False

    if filters.min_price is not None and prop.price < filters.min_price:
        return False
    if filters.max_price is not None and prop.price > filters.max_price:
        return False

    if filters.min_beds is not None and prop.bedrooms < filters.min_beds:
        return False
    if filters.min_baths is not None and prop.bathrooms < filters.min_baths:
        return False

    if filters.property_type is not None and prop.property_type != filters.property_type:
        return False
    if filters.listing_type is not None and prop.listing_type != filters.listing_type:
        return False

    if filters.min_sqft is not None and prop.square_feet < filters.min_sqft:
        return False
    if filters.max_sqft is not None and prop.square_feet > filters.max_sqft:
        return False

    # Unknown construction year never satisfies a year bound.
    if filters.min_year is not None and (prop.year_built is None or prop.year_built < filters.min_year):
        return False
    if filters.max_year is not None and (prop.year_built is None or prop.year_built > filters.max_year):
        return False

    return True


def query_properties(
    store: MemoryStore,
    filters: Union[PropertyFilter, Mapping[str, Any], None] = None
) -> list[Property]:
    """Return properties matching all filter constraints, in storage order."""
    if filters is not None and not isinstance(filters, PropertyFilter):
        filters = parse_property_filter(filters)

    properties = store.list_properties()
    if filters is None or filters.is_empty():
        return properties

    with log_timing("query_properties", logger=logger, candidates=len(properties)):
        results = [p for p in properties if matches_filter(p, filters)]

    logger.info(
        "Properties queried",
        filters=filters.model_dump(mode="json", exclude_none=True),
        candidates=len(properties),
        matched=len(results)
    )
    return results


def get_featured_properties(store: MemoryStore) -> list[Property]:
    """Properties flagged for promotional placement, in storage order."""
    return [p for p in store.list_properties() if p.featured]
