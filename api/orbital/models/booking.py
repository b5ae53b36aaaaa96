"""
Booking Model & Status Transition Tables
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Optional


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Any status may move to any other status
UNRESTRICTED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    status: frozenset(BookingStatus) for status in BookingStatus
}

# Cancelled is terminal; confirmed can only be cancelled
STRICT_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(BookingStatus),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset({BookingStatus.CANCELLED}),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Booking:
    id: int
    user_id: int
    destination_id: int
    package_id: int
    departure_date: date
    return_date: date
    travelers: int
    total_price: int
    accommodation_id: Optional[int] = None
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)

    def __repr__(self):
        return f"<Booking {self.id} user={self.user_id} {self.status.value}>"
