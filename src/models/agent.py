"""Agent model - read-only reference data shown on the home page."""

from pydantic import BaseModel, Field


class Agent(BaseModel):
    """Real estate agent."""
    id: int = Field(..., ge=1, description="Agent ID (store-assigned)")
    name: str = Field(..., description="Full name")
    specialization: str = Field(..., description="Specialization blurb")
    rating: float = Field(..., ge=0.0, le=5.0, description="Agent rating (0-5)")
    properties_sold: int = Field(..., ge=0, description="Number of properties sold")
    image_url: str = Field(..., description="Portrait image reference")
