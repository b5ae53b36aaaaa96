"""In-memory record types"""
from orbital.models.user import User
from orbital.models.destination import Destination
from orbital.models.package import Package, PackageType
from orbital.models.accommodation import Accommodation
from orbital.models.testimonial import Testimonial
from orbital.models.booking import (
    Booking,
    BookingStatus,
    UNRESTRICTED_TRANSITIONS,
    STRICT_TRANSITIONS,
)

__all__ = [
    "User", "Destination", "Package", "PackageType", "Accommodation",
    "Testimonial", "Booking", "BookingStatus",
    "UNRESTRICTED_TRANSITIONS", "STRICT_TRANSITIONS",
]
