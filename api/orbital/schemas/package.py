"""
Package Schemas
"""
from pydantic import BaseModel, Field
from typing import List

from orbital.models.package import PackageType


class PackageCreate(BaseModel):
    """Schema for creating a travel package"""
    name: str = Field(..., min_length=1, max_length=255)
    description: str
    price: int = Field(..., ge=0)
    features: List[str] = []
    is_popular: bool = False
    type: PackageType


class PackageResponse(PackageCreate):
    """Schema for package response"""
    id: int

    class Config:
        from_attributes = True
