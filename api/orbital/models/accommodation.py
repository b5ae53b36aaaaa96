"""
Accommodation Model
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Accommodation:
    id: int
    destination_id: int
    name: str
    description: str
    image_url: str
    location: str  # Display name of the destination
    capacity: str  # "2-4 guests"
    price_per_night: int
    rating: float
    amenities: List[str] = field(default_factory=list)

    def __repr__(self):
        return f"<Accommodation {self.name} @ destination {self.destination_id}>"
