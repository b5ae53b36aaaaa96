"""
Testimonial Model
"""
from dataclasses import dataclass


@dataclass
class Testimonial:
    id: int
    name: str
    avatar_url: str
    testimonial: str
    rating: int
    package_type: str
    destination: str

    def __repr__(self):
        return f"<Testimonial by {self.name}>"
