"""
Destination Schemas
"""
from pydantic import BaseModel, Field


class DestinationBase(BaseModel):
    """Base destination schema"""
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    image_url: str
    location: str = Field(..., min_length=1, max_length=100)
    distance: str
    travel_time: str
    price: int = Field(..., ge=0)
    rating: float = Field(..., ge=0, le=5)
    review_count: int = Field(..., ge=0)
    featured: bool = False
    is_new: bool = False


class DestinationCreate(DestinationBase):
    """Schema for creating a destination"""
    pass


class DestinationResponse(DestinationBase):
    """Schema for destination response"""
    id: int

    class Config:
        from_attributes = True
