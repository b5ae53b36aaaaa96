"""
Price Calculator - derives booking totals from package, lodging and dates
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, Optional

from orbital.errors import InvalidArgumentError
from orbital.models import Accommodation, Package


@dataclass(frozen=True)
class PriceQuote:
    """Breakdown of a booking price"""
    package_price: int
    travelers: int
    base_price: int
    nights: Optional[int] = None
    price_per_night: Optional[int] = None
    lodging_price: int = 0

    @property
    def total_price(self) -> int:
        return self.base_price + self.lodging_price


def calculate_nights(departure_date: date, return_date: date) -> int:
    """
    Nights of lodging between two dates, never fewer than one.

    Equal or inverted dates still count as a single night.
    """
    return max(1, (return_date - departure_date).days)


def build_quote(
    package: Package,
    travelers: int,
    accommodation: Optional[Accommodation] = None,
    departure_date: Optional[date] = None,
    return_date: Optional[date] = None,
) -> PriceQuote:
    """
    Price a trip.

    Lodging is charged per night per traveler, and only when an
    accommodation is selected and both dates are known.
    """
    if travelers < 1:
        raise InvalidArgumentError("travelers", "At least 1 traveler is required")

    base_price = package.price * travelers

    if accommodation is not None and departure_date is not None and return_date is not None:
        nights = calculate_nights(departure_date, return_date)
        return PriceQuote(
            package_price=package.price,
            travelers=travelers,
            base_price=base_price,
            nights=nights,
            price_per_night=accommodation.price_per_night,
            lodging_price=accommodation.price_per_night * nights * travelers,
        )

    return PriceQuote(
        package_price=package.price,
        travelers=travelers,
        base_price=base_price,
    )


def calculate_total_price(
    package: Package,
    travelers: int,
    accommodation: Optional[Accommodation] = None,
    departure_date: Optional[date] = None,
    return_date: Optional[date] = None,
) -> int:
    """Total price of a trip, see `build_quote`"""
    return build_quote(package, travelers, accommodation, departure_date, return_date).total_price


def time_until(departure_date: date, now: Optional[datetime] = None) -> Dict[str, int]:
    """
    Countdown to midnight UTC of the departure date, split into
    days/hours/minutes/seconds. All zero once the date has passed.
    """
    now = now or datetime.now(timezone.utc)
    departure = datetime(
        departure_date.year, departure_date.month, departure_date.day, tzinfo=timezone.utc
    )
    remaining = max(0, int((departure - now).total_seconds()))

    days, remaining = divmod(remaining, 86400)
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    return {"days": days, "hours": hours, "minutes": minutes, "seconds": seconds}
