"""
User Schemas
"""
from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    full_name: str = Field(..., min_length=1, max_length=255)


class UserLogin(BaseModel):
    """Schema for login"""
    username: str
    password: str


class UserResponse(BaseModel):
    """Schema for user response - never carries the password"""
    id: int
    username: str
    email: EmailStr
    full_name: str

    class Config:
        from_attributes = True
