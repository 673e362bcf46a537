"""Typed filter and map-bounds models used by the query engine."""

from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, Field


class PropertyFilter(BaseModel):
    """Parsed property filter. A None field means no constraint."""
    city: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_beds: Optional[int] = None
    min_baths: Optional[int] = None
    property_type: Optional[str] = None
    listing_type: Optional[str] = None
    min_sqft: Optional[int] = None
    max_sqft: Optional[int] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class MapBounds(BaseModel):
    """Inclusive latitude/longitude box."""
    north: float = Field(..., ge=-90, le=90)
    south: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)
    west: float = Field(..., ge=-180, le=180)
