"""
Testimonial Schemas
"""
from pydantic import BaseModel, Field


class TestimonialCreate(BaseModel):
    """Schema for creating a testimonial"""
    name: str = Field(..., min_length=1, max_length=255)
    avatar_url: str
    testimonial: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    package_type: str
    destination: str


class TestimonialResponse(TestimonialCreate):
    """Schema for testimonial response"""
    id: int

    class Config:
        from_attributes = True
