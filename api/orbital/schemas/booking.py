"""
Booking Schemas
"""
from pydantic import BaseModel, computed_field
from typing import Dict, Optional
from datetime import date, datetime

from orbital.models.booking import BookingStatus
from orbital.services.pricing import calculate_nights, time_until


class BookingQuoteRequest(BaseModel):
    """Schema for pricing a trip without booking it"""
    destination_id: int
    package_id: int
    accommodation_id: Optional[int] = None
    departure_date: Optional[date] = None
    return_date: Optional[date] = None
    travelers: int = 1


class BookingCreate(BaseModel):
    """
    Schema for creating a booking.
    total_price is optional and only checked against the computed total.
    """
    user_id: int
    destination_id: int
    package_id: int
    accommodation_id: Optional[int] = None
    departure_date: date
    return_date: date
    travelers: int
    total_price: Optional[int] = None


class BookingStatusUpdate(BaseModel):
    """Schema for a status change; the value is checked by the service"""
    status: str


class PriceQuoteResponse(BaseModel):
    """Schema for price breakdown"""
    package_price: int
    travelers: int
    base_price: int
    nights: Optional[int] = None
    price_per_night: Optional[int] = None
    lodging_price: int
    total_price: int

    class Config:
        from_attributes = True


class BookingResponse(BaseModel):
    """Schema for booking response"""
    id: int
    user_id: int
    destination_id: int
    package_id: int
    accommodation_id: Optional[int]
    departure_date: date
    return_date: date
    travelers: int
    total_price: int
    status: BookingStatus
    created_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def nights(self) -> Optional[int]:
        """Nights of lodging billed, when an accommodation was booked"""
        if self.accommodation_id is None:
            return None
        return calculate_nights(self.departure_date, self.return_date)

    @computed_field
    @property
    def time_until_departure(self) -> Dict[str, int]:
        return time_until(self.departure_date)
