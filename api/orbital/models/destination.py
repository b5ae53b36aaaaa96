"""
Destination Model
"""
from dataclasses import dataclass


@dataclass
class Destination:
    id: int
    name: str
    description: str
    image_url: str
    location: str  # LEO, MOON, ORBIT, etc.
    distance: str  # "350 km altitude"
    travel_time: str  # "2-day journey"
    price: int  # Base price per person
    rating: float
    review_count: int
    featured: bool = False
    is_new: bool = False

    def __repr__(self):
        return f"<Destination {self.name} ({self.location})>"
