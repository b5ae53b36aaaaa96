"""
Accommodation Schemas
"""
from pydantic import BaseModel, Field
from typing import List


class AccommodationCreate(BaseModel):
    """
    Schema for creating an accommodation.
    `location` is filled from the destination when omitted.
    """
    destination_id: int
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    image_url: str
    location: str = ""
    capacity: str  # "2-4 guests"
    price_per_night: int = Field(..., ge=0)
    amenities: List[str] = []
    rating: float = Field(..., ge=0, le=5)


class AccommodationResponse(BaseModel):
    """Schema for accommodation response"""
    id: int
    destination_id: int
    name: str
    description: str
    image_url: str
    location: str
    capacity: str
    price_per_night: int
    amenities: List[str]
    rating: float

    class Config:
        from_attributes = True
