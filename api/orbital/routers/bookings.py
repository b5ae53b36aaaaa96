"""
Booking Endpoints
"""
from fastapi import APIRouter, Depends, status

from orbital.routers.deps import get_booking_service
from orbital.schemas.booking import (
    BookingCreate,
    BookingQuoteRequest,
    BookingResponse,
    BookingStatusUpdate,
    PriceQuoteResponse,
)
from orbital.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_data: BookingCreate,
    bookings: BookingService = Depends(get_booking_service),
):
    """
    Create a booking.

    The total price is always computed by the server. A submitted
    total_price that does not match it is rejected.
    """
    return bookings.create_booking(booking_data)


@router.post("/quote", response_model=PriceQuoteResponse)
async def quote_booking(
    quote_request: BookingQuoteRequest,
    bookings: BookingService = Depends(get_booking_service),
):
    """
    Price breakdown for a prospective booking, nothing is stored
    """
    quote = bookings.quote(quote_request)
    return PriceQuoteResponse.model_validate(quote)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    bookings: BookingService = Depends(get_booking_service),
):
    return bookings.get_booking(booking_id)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: int,
    status_update: BookingStatusUpdate,
    bookings: BookingService = Depends(get_booking_service),
):
    """
    Move a booking to pending, confirmed or cancelled
    """
    return bookings.set_status(booking_id, status_update.status)
