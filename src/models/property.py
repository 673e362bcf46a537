"""Property model - a listing offered for sale or rent."""

from typing import Optional, Literal
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from src.models.user import utc_now

ListingType = Literal["buy", "rent"]

PROPERTY_TYPES = ("House", "Apartment", "Condo", "Townhouse", "Land", "Commercial")


class PropertyBase(BaseModel):
    """Fields a lister supplies when creating a property."""
    title: str = Field(..., min_length=1, description="Listing headline")
    description: str = Field(..., description="Listing body text")
    price: Decimal = Field(..., ge=0, description="Asking price (sale) or monthly rent")
    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    state: str = Field(..., description="State")
    zip_code: str = Field(..., description="ZIP code")
    lat: Decimal = Field(..., ge=-90, le=90, description="Latitude")
    lng: Decimal = Field(..., ge=-180, le=180, description="Longitude")
    bedrooms: int = Field(..., ge=0, description="Bedroom count")
    bathrooms: int = Field(..., ge=0, description="Bathroom count")
    square_feet: int = Field(..., ge=0, description="Interior square footage")
    year_built: Optional[int] = Field(None, description="Year of construction")
    property_type: str = Field(
        ...,
        description="Open set: House, Apartment, Condo, Townhouse, ..."
    )
    listing_type: ListingType = Field(..., description="buy or rent")
    image_url: str = Field(..., description="Primary image reference")
    featured: bool = Field(default=False, description="Promoted placement flag")
    status: str = Field(
        default="available",
        description="Free text: available, new, open_house, ..."
    )


class Property(PropertyBase):
    """Stored property with identity, ownership and rating aggregate."""
    id: int = Field(..., ge=1, description="Property ID (store-assigned)")
    user_id: int = Field(..., ge=1, description="Owning user ID")
    avg_rating: float = Field(default=0.0, ge=0.0, le=5.0, description="Mean of submitted ratings")
    rating_count: int = Field(default=0, ge=0, description="Number of submitted ratings")
    created_at: datetime = Field(default_factory=utc_now)
