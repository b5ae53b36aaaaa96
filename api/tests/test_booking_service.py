"""
Booking service: reference validation, pricing, status lifecycle.
"""
from datetime import date

import pytest

from orbital.config import Settings
from orbital.errors import InvalidArgumentError, InvalidTransitionError, NotFoundError
from orbital.models import Booking, BookingStatus
from orbital.schemas.booking import BookingCreate, BookingQuoteRequest
from orbital.services.booking_service import BookingService

# Seeded ids
ORBITAL_STATION, LUNAR_COLONY, MARS_HOTEL = 1, 2, 3
ECONOMY, LUXURY, VIP = 1, 2, 3
LUNAR_SUITE, ORBITAL_POD = 1, 2


def make_service(store, **overrides) -> BookingService:
    return BookingService(store, Settings(REDIS_URL="", **overrides))


def booking_request(user_id: int, **overrides) -> BookingCreate:
    data = dict(
        user_id=user_id,
        destination_id=LUNAR_COLONY,
        package_id=LUXURY,
        accommodation_id=LUNAR_SUITE,
        departure_date=date(2025, 1, 1),
        return_date=date(2025, 1, 4),
        travelers=2,
    )
    data.update(overrides)
    return BookingCreate(**data)


@pytest.fixture
def service(seeded_store) -> BookingService:
    return make_service(seeded_store)


def test_create_booking_computes_total(service, alice):
    booking = service.create_booking(booking_request(alice.id))

    assert booking.id == 1
    assert booking.total_price == 225000
    assert booking.status == BookingStatus.PENDING
    assert booking.created_at is not None


def test_create_booking_without_accommodation(service, alice):
    booking = service.create_booking(
        booking_request(alice.id, destination_id=ORBITAL_STATION, package_id=ECONOMY, accommodation_id=None)
    )

    assert booking.total_price == 50000
    assert booking.accommodation_id is None


def test_matching_client_total_is_accepted(service, alice):
    booking = service.create_booking(booking_request(alice.id, total_price=225000))

    assert booking.total_price == 225000


def test_mismatched_client_total_is_rejected(service, alice, seeded_store):
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.create_booking(booking_request(alice.id, total_price=1))

    assert exc_info.value.field == "total_price"
    assert seeded_store.count(Booking) == 0


@pytest.mark.parametrize("travelers", [0, 11, -1])
def test_travelers_out_of_range(service, alice, seeded_store, travelers):
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.create_booking(booking_request(alice.id, travelers=travelers))

    assert exc_info.value.field == "travelers"
    assert seeded_store.count(Booking) == 0


@pytest.mark.parametrize("travelers", [1, 10])
def test_travelers_bounds_are_inclusive(service, alice, travelers):
    assert service.create_booking(booking_request(alice.id, travelers=travelers)).travelers == travelers


def test_max_travelers_is_configurable(seeded_store, alice):
    service = make_service(seeded_store, MAX_TRAVELERS=4)

    with pytest.raises(InvalidArgumentError):
        service.create_booking(booking_request(alice.id, travelers=5))


def test_unknown_package_creates_nothing(service, alice, seeded_store):
    with pytest.raises(NotFoundError) as exc_info:
        service.create_booking(booking_request(alice.id, package_id=99))

    assert exc_info.value.entity == "Package"
    assert exc_info.value.entity_id == 99
    assert seeded_store.count(Booking) == 0


@pytest.mark.parametrize(
    "overrides,missing",
    [
        (dict(user_id=99, destination_id=99, package_id=99, accommodation_id=99), "User"),
        (dict(destination_id=99, package_id=99, accommodation_id=99), "Destination"),
        (dict(package_id=99, accommodation_id=99), "Package"),
        (dict(accommodation_id=99), "Accommodation"),
    ],
)
def test_first_missing_reference_is_reported(service, alice, overrides, missing):
    request = booking_request(**{"user_id": alice.id, **overrides})

    with pytest.raises(NotFoundError) as exc_info:
        service.create_booking(request)

    assert exc_info.value.entity == missing


def test_accommodation_must_belong_to_destination(service, alice):
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.create_booking(booking_request(alice.id, accommodation_id=ORBITAL_POD))

    assert exc_info.value.field == "accommodation_id"


def test_return_before_departure_rejected(service, alice):
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.create_booking(
            booking_request(alice.id, departure_date=date(2025, 1, 4), return_date=date(2025, 1, 1))
        )

    assert exc_info.value.field == "return_date"


def test_same_day_trip_billed_one_night(service, alice):
    booking = service.create_booking(
        booking_request(alice.id, departure_date=date(2025, 1, 1), return_date=date(2025, 1, 1))
    )

    assert booking.total_price == 75000 * 2 + 12500 * 1 * 2


def test_inverted_dates_allowed_when_order_not_enforced(seeded_store, alice):
    service = make_service(seeded_store, ENFORCE_DATE_ORDER=False)

    booking = service.create_booking(
        booking_request(alice.id, departure_date=date(2025, 1, 4), return_date=date(2025, 1, 1))
    )

    assert booking.total_price == 75000 * 2 + 12500 * 1 * 2


def test_quote_matches_booking_total(service, alice):
    quote = service.quote(
        BookingQuoteRequest(
            destination_id=LUNAR_COLONY,
            package_id=LUXURY,
            accommodation_id=LUNAR_SUITE,
            departure_date=date(2025, 1, 1),
            return_date=date(2025, 1, 4),
            travelers=2,
        )
    )
    booking = service.create_booking(booking_request(alice.id))

    assert quote.total_price == booking.total_price


def test_quote_stores_nothing(service, seeded_store):
    service.quote(BookingQuoteRequest(destination_id=ORBITAL_STATION, package_id=ECONOMY, travelers=3))

    assert seeded_store.count(Booking) == 0


def test_bookings_for_user(service, alice):
    first = service.create_booking(booking_request(alice.id))
    second = service.create_booking(booking_request(alice.id, travelers=1))

    assert [b.id for b in service.list_bookings_for_user(alice.id)] == [first.id, second.id]


def test_bookings_for_unknown_user(service):
    with pytest.raises(NotFoundError) as exc_info:
        service.list_bookings_for_user(42)

    assert exc_info.value.entity == "User"


def test_get_booking_missing(service):
    with pytest.raises(NotFoundError):
        service.get_booking(1)


def test_confirm_booking(service, alice):
    booking = service.create_booking(booking_request(alice.id))

    updated = service.set_status(booking.id, "confirmed")

    assert updated.status == BookingStatus.CONFIRMED
    assert service.get_booking(booking.id).status == BookingStatus.CONFIRMED
    assert updated.total_price == booking.total_price
    assert updated.created_at == booking.created_at


def test_bogus_status_leaves_booking_unchanged(service, alice):
    booking = service.create_booking(booking_request(alice.id))
    service.set_status(booking.id, "confirmed")

    with pytest.raises(InvalidArgumentError) as exc_info:
        service.set_status(booking.id, "bogus")

    assert exc_info.value.field == "status"
    assert service.get_booking(booking.id).status == BookingStatus.CONFIRMED


def test_status_on_missing_booking(service):
    with pytest.raises(NotFoundError) as exc_info:
        service.set_status(404, "confirmed")

    assert exc_info.value.entity == "Booking"


def test_transitions_unrestricted_by_default(service, alice):
    booking = service.create_booking(booking_request(alice.id))

    for status in ("cancelled", "pending", "confirmed", "cancelled", "confirmed"):
        assert service.set_status(booking.id, status).status.value == status


def test_strict_transitions_make_cancelled_terminal(seeded_store, alice):
    service = make_service(seeded_store, STRICT_STATUS_TRANSITIONS=True)
    booking = service.create_booking(booking_request(alice.id))

    service.set_status(booking.id, BookingStatus.CONFIRMED)
    service.set_status(booking.id, BookingStatus.CANCELLED)

    with pytest.raises(InvalidTransitionError) as exc_info:
        service.set_status(booking.id, BookingStatus.PENDING)

    assert exc_info.value.current == "cancelled"
    assert exc_info.value.requested == "pending"
    assert service.get_booking(booking.id).status == BookingStatus.CANCELLED


def test_strict_transitions_block_unconfirming(seeded_store, alice):
    service = make_service(seeded_store, STRICT_STATUS_TRANSITIONS=True)
    booking = service.create_booking(booking_request(alice.id))
    service.set_status(booking.id, "confirmed")

    with pytest.raises(InvalidTransitionError):
        service.set_status(booking.id, "pending")
