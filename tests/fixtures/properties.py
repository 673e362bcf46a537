"""Property payload fixtures."""

from typing import Dict, Any


def los_angeles_house() -> Dict[str, Any]:
    """Three-bed house for sale in Los Angeles."""
    return {
        "title": "Modern Hillside Home",
        "description": "Open floor plan with canyon views and a pool.",
        "price": "500000",
        "address": "1200 Laurel Canyon Blvd",
        "city": "Los Angeles",
        "state": "CA",
        "zip_code": "90046",
        "lat": "34.1030",
        "lng": "-118.3790",
        "bedrooms": 3,
        "bathrooms": 2,
        "square_feet": 2100,
        "year_built": 1998,
        "property_type": "House",
        "listing_type": "buy",
        "image_url": "/images/la-house.jpg",
        "featured": True,
    }


def austin_apartment() -> Dict[str, Any]:
    """Two-bed apartment in Austin with no recorded construction year."""
    return {
        "title": "Downtown Loft",
        "description": "Walkable to Congress Ave, rooftop deck.",
        "price": "300000",
        "address": "301 W 2nd St",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78701",
        "lat": "30.2650",
        "lng": "-97.7467",
        "bedrooms": 2,
        "bathrooms": 1,
        "square_feet": 950,
        "year_built": None,
        "property_type": "Apartment",
        "listing_type": "rent",
        "image_url": "/images/austin-loft.jpg",
    }


def seattle_condo() -> Dict[str, Any]:
    """Two-bed condo for sale in Seattle, built 2015."""
    return {
        "title": "Lake Union Condo",
        "description": "Floor-to-ceiling windows facing the water.",
        "price": "650000",
        "address": "901 Fairview Ave N",
        "city": "Seattle",
        "state": "WA",
        "zip_code": "98109",
        "lat": "47.6275",
        "lng": "-122.3330",
        "bedrooms": 2,
        "bathrooms": 2,
        "square_feet": 1200,
        "year_built": 2015,
        "property_type": "Condo",
        "listing_type": "buy",
        "image_url": "/images/seattle-condo.jpg",
        "status": "open_house",
    }
