"""
Booking Service - reference checks, pricing and the status lifecycle
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union
import logging

from orbital.config import Settings
from orbital.errors import (
    InvalidArgumentError,
    InvalidTransitionError,
    NotFoundError,
)
from orbital.models import (
    Accommodation,
    Booking,
    BookingStatus,
    Destination,
    Package,
    STRICT_TRANSITIONS,
    UNRESTRICTED_TRANSITIONS,
    User,
)
from orbital.schemas.booking import BookingCreate, BookingQuoteRequest
from orbital.services.pricing import PriceQuote, build_quote
from orbital.utils.store import EntityStore

logger = logging.getLogger(__name__)


@dataclass
class BookingReferences:
    """Records a booking request points at, resolved from their ids"""
    user: Optional[User]
    destination: Destination
    package: Package
    accommodation: Optional[Accommodation] = None


class BookingService:
    """
    Creates bookings and moves them between statuses.

    A booking is only stored once every referenced record exists and the
    price has been computed server-side; on any failure nothing is stored.
    """

    def __init__(self, store: EntityStore, settings: Settings):
        self.store = store
        self.max_travelers = settings.MAX_TRAVELERS
        self.enforce_date_order = settings.ENFORCE_DATE_ORDER
        self.transitions = (
            STRICT_TRANSITIONS if settings.STRICT_STATUS_TRANSITIONS else UNRESTRICTED_TRANSITIONS
        )

    def _check_travelers(self, travelers: int):
        if not 1 <= travelers <= self.max_travelers:
            raise InvalidArgumentError(
                "travelers",
                f"Travelers must be between 1 and {self.max_travelers}, got {travelers}",
            )

    def _check_dates(self, departure_date: Optional[date], return_date: Optional[date]):
        if not self.enforce_date_order or departure_date is None or return_date is None:
            return
        if return_date < departure_date:
            raise InvalidArgumentError(
                "return_date",
                f"Return date {return_date} is before departure date {departure_date}",
            )

    def _resolve_trip(
        self,
        destination_id: int,
        package_id: int,
        accommodation_id: Optional[int],
    ) -> BookingReferences:
        destination = self.store.get_by_id(Destination, destination_id)
        if destination is None:
            raise NotFoundError("Destination", destination_id)

        package = self.store.get_by_id(Package, package_id)
        if package is None:
            raise NotFoundError("Package", package_id)

        accommodation = None
        if accommodation_id is not None:
            accommodation = self.store.get_by_id(Accommodation, accommodation_id)
            if accommodation is None:
                raise NotFoundError("Accommodation", accommodation_id)
            if accommodation.destination_id != destination.id:
                raise InvalidArgumentError(
                    "accommodation_id",
                    f"Accommodation {accommodation.id} is not at destination {destination.id}",
                )

        return BookingReferences(
            user=None, destination=destination, package=package, accommodation=accommodation
        )

    def validate_references(
        self,
        user_id: int,
        destination_id: int,
        package_id: int,
        accommodation_id: Optional[int] = None,
    ) -> BookingReferences:
        """
        Resolve every id a booking references.

        Checked in a fixed order (user, destination, package, accommodation)
        and the first missing record is reported.
        """
        user = self.store.get_by_id(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        references = self._resolve_trip(destination_id, package_id, accommodation_id)
        references.user = user
        return references

    def quote(self, request: BookingQuoteRequest) -> PriceQuote:
        """Price a trip exactly as `create_booking` would, without storing anything"""
        self._check_travelers(request.travelers)
        self._check_dates(request.departure_date, request.return_date)
        references = self._resolve_trip(
            request.destination_id, request.package_id, request.accommodation_id
        )
        return build_quote(
            references.package,
            request.travelers,
            references.accommodation,
            request.departure_date,
            request.return_date,
        )

    def create_booking(self, data: BookingCreate) -> Booking:
        self._check_travelers(data.travelers)
        self._check_dates(data.departure_date, data.return_date)
        references = self.validate_references(
            data.user_id, data.destination_id, data.package_id, data.accommodation_id
        )

        quote = build_quote(
            references.package,
            data.travelers,
            references.accommodation,
            data.departure_date,
            data.return_date,
        )
        if data.total_price is not None and data.total_price != quote.total_price:
            logger.warning(
                f"Rejected booking for user {data.user_id}: submitted total "
                f"{data.total_price} != computed {quote.total_price}"
            )
            raise InvalidArgumentError(
                "total_price",
                f"Submitted total price {data.total_price} does not match "
                f"computed price {quote.total_price}",
            )

        booking = self.store.create(
            Booking,
            user_id=data.user_id,
            destination_id=data.destination_id,
            package_id=data.package_id,
            accommodation_id=data.accommodation_id,
            departure_date=data.departure_date,
            return_date=data.return_date,
            travelers=data.travelers,
            total_price=quote.total_price,
        )
        logger.info(
            f"Booking created: {booking.id} for user {booking.user_id} "
            f"to destination {booking.destination_id}, total {booking.total_price}"
        )
        return booking

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.store.get_by_id(Booking, booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    def list_bookings_for_user(self, user_id: int) -> List[Booking]:
        if self.store.get_by_id(User, user_id) is None:
            raise NotFoundError("User", user_id)
        return self.store.find_by_field(Booking, "user_id", user_id)

    def set_status(self, booking_id: int, status: Union[str, BookingStatus]) -> Booking:
        """
        Move a booking to `status`.

        Only the status field changes. The value is validated before the
        booking is looked up.
        """
        try:
            new_status = BookingStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in BookingStatus)
            raise InvalidArgumentError("status", f"Invalid status '{status}', expected one of: {allowed}")

        previous = []

        def check_transition(current: Booking):
            if new_status not in self.transitions[current.status]:
                logger.warning(
                    f"Rejected status change for booking {booking_id}: "
                    f"{current.status.value} -> {new_status.value}"
                )
                raise InvalidTransitionError(current.status.value, new_status.value)
            previous.append(current.status)

        updated = self.store.update(
            Booking, booking_id, precondition=check_transition, status=new_status
        )
        if updated is None:
            raise NotFoundError("Booking", booking_id)

        logger.info(f"Booking {booking_id} status: {previous[0].value} -> {new_status.value}")
        return updated
