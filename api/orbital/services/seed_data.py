"""
Demo Catalog Seeder
Loads the launch catalog into a fresh store. Order is fixed so ids are stable:
destinations 1-3, packages 1-3, accommodations 1-2, testimonials 1-3.
"""
from typing import Dict
import logging

from orbital.models import Accommodation, Destination, Package, Testimonial
from orbital.schemas.accommodation import AccommodationCreate
from orbital.schemas.destination import DestinationCreate
from orbital.schemas.package import PackageCreate
from orbital.schemas.testimonial import TestimonialCreate
from orbital.services.catalog_service import CatalogService
from orbital.utils.store import EntityStore

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

DESTINATIONS = [
    {
        "name": "Orbital Space Station",
        "description": "Experience zero gravity in our state-of-the-art space station with Earth views from every suite.",
        "image_url": _UNSPLASH.format("1614728894747-a83421e2b9c9"),
        "location": "LEO",
        "distance": "350 km altitude",
        "travel_time": "2-day journey",
        "price": 25000,
        "rating": 4.9,
        "review_count": 128,
        "featured": True,
        "is_new": False,
    },
    {
        "name": "Lunar Colony Alpha",
        "description": "Visit humanity's first permanent lunar settlement with luxury accommodations and moonwalks.",
        "image_url": _UNSPLASH.format("1581822261290-991b38693d1b"),
        "location": "MOON",
        "distance": "384,400 km",
        "travel_time": "3-day journey",
        "price": 58000,
        "rating": 4.7,
        "review_count": 96,
        "featured": True,
        "is_new": False,
    },
    {
        "name": "Mars Transit Hotel",
        "description": "Experience the revolutionary transit hotel on the Mars-Earth route with cosmic observation decks.",
        "image_url": _UNSPLASH.format("1545156521-77bd85671d30"),
        "location": "ORBIT",
        "distance": "Mars-Earth route",
        "travel_time": "7-day stay",
        "price": 112000,
        "rating": 4.8,
        "review_count": 77,
        "featured": True,
        "is_new": True,
    },
]

PACKAGES = [
    {
        "name": "Economy Shuttle",
        "description": "The basic space travel experience",
        "price": 25000,
        "features": [
            "Standard pod accommodation",
            "3 zero-gravity experiences",
            "Basic space meals",
            "Shared observation deck access",
        ],
        "is_popular": False,
        "type": "economy",
    },
    {
        "name": "Luxury Cabin",
        "description": "Premium space experience with perks",
        "price": 75000,
        "features": [
            "Private luxury pod with window",
            "Unlimited zero-gravity sessions",
            "Gourmet space cuisine",
            "Premium observation deck access",
            "One scheduled space walk",
        ],
        "is_popular": True,
        "type": "luxury",
    },
    {
        "name": "VIP Experience",
        "description": "Ultimate exclusive space journey",
        "price": 150000,
        "features": [
            "Luxury suite with panoramic views",
            "Customized zero-gravity experiences",
            "Personal chef and premium dining",
            "Private observation deck hours",
            "Multiple private space walks",
            "Professional photography package",
        ],
        "is_popular": False,
        "type": "vip",
    },
]

# destination_id refers to the position in DESTINATIONS (1-based)
ACCOMMODATIONS = [
    {
        "destination_id": 2,
        "name": "Lunar Habitat Suite",
        "description": "Luxury lunar accommodations with Earth views and private lunar terrain access.",
        "image_url": _UNSPLASH.format("1636953056323-9c09fdd74fa6"),
        "capacity": "2-4 guests",
        "price_per_night": 12500,
        "amenities": ["Panoramic View", "Gravity Control", "Private Airlock"],
        "rating": 4.8,
    },
    {
        "destination_id": 1,
        "name": "Orbital Luxury Pod",
        "description": "Premium orbital accommodations with 360° Earth views and zero-gravity sleeping chambers.",
        "image_url": _UNSPLASH.format("1518365050014-70fe7232897f"),
        "capacity": "1-2 guests",
        "price_per_night": 8900,
        "amenities": ["Earth View", "Zero-G Suite", "Premium Life Support"],
        "rating": 4.9,
    },
]

TESTIMONIALS = [
    {
        "name": "Sarah J.",
        "avatar_url": "https://randomuser.me/api/portraits/women/54.jpg",
        "testimonial": "The lunar colony experience was beyond words. Watching Earth rise over the lunar landscape from my suite was a life-changing moment. The staff was incredibly attentive to safety while making the experience magical.",
        "rating": 5,
        "package_type": "Economy Package",
        "destination": "Lunar Colony Alpha",
    },
    {
        "name": "Marcus T.",
        "avatar_url": "https://randomuser.me/api/portraits/men/32.jpg",
        "testimonial": "I splurged on the VIP package for my 50th birthday and it was worth every penny. The private space walks with expert guides gave me perspectives on our planet that I'll never forget. The zero-G cuisine was surprisingly delicious!",
        "rating": 4,
        "package_type": "VIP Experience",
        "destination": "Orbital Space Station",
    },
    {
        "name": "Elena K.",
        "avatar_url": "https://randomuser.me/api/portraits/women/28.jpg",
        "testimonial": "My partner and I booked the Luxury Cabin for our honeymoon. The staff created such a romantic atmosphere despite being in space! The panoramic views from our cabin were incredible, and the photography package captured memories we'll cherish forever.",
        "rating": 5,
        "package_type": "Luxury Package",
        "destination": "Mars Transit Hotel",
    },
]


def seed_demo_data(store: EntityStore) -> Dict[str, int]:
    """
    Populate an empty store with the demo catalog.
    Returns the number of records created per type.
    """
    catalog = CatalogService(store)

    for data in DESTINATIONS:
        catalog.create_destination(DestinationCreate(**data))
    for data in PACKAGES:
        catalog.create_package(PackageCreate(**data))
    for data in ACCOMMODATIONS:
        catalog.create_accommodation(AccommodationCreate(**data))
    for data in TESTIMONIALS:
        catalog.create_testimonial(TestimonialCreate(**data))

    counts = {
        "destinations": store.count(Destination),
        "packages": store.count(Package),
        "accommodations": store.count(Accommodation),
        "testimonials": store.count(Testimonial),
    }
    logger.info(f"Seeded demo catalog: {counts}")
    return counts
