"""
Catalog Service - destinations, packages, accommodations and testimonials
"""
from typing import List, Optional
import logging

from orbital.errors import NotFoundError
from orbital.models import Accommodation, Destination, Package, Testimonial
from orbital.schemas.accommodation import AccommodationCreate
from orbital.schemas.destination import DestinationCreate
from orbital.schemas.package import PackageCreate
from orbital.schemas.testimonial import TestimonialCreate
from orbital.utils.store import EntityStore

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Read and create catalog entries. Catalog records are immutable once created.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    # Destinations

    def list_destinations(self) -> List[Destination]:
        return self.store.list(Destination)

    def featured_destinations(self) -> List[Destination]:
        return self.store.find_by_field(Destination, "featured", True)

    def get_destination(self, destination_id: int) -> Destination:
        destination = self.store.get_by_id(Destination, destination_id)
        if destination is None:
            raise NotFoundError("Destination", destination_id)
        return destination

    def create_destination(self, data: DestinationCreate) -> Destination:
        destination = self.store.create(Destination, **data.model_dump())
        logger.info(f"Destination created: {destination.id} ({destination.name})")
        return destination

    # Packages

    def list_packages(self) -> List[Package]:
        return self.store.list(Package)

    def get_package(self, package_id: int) -> Package:
        package = self.store.get_by_id(Package, package_id)
        if package is None:
            raise NotFoundError("Package", package_id)
        return package

    def create_package(self, data: PackageCreate) -> Package:
        package = self.store.create(Package, **data.model_dump())
        logger.info(f"Package created: {package.id} ({package.name})")
        return package

    # Accommodations

    def list_accommodations(self, destination_id: Optional[int] = None) -> List[Accommodation]:
        if destination_id is None:
            return self.store.list(Accommodation)
        return self.store.find_by_field(Accommodation, "destination_id", destination_id)

    def accommodations_for_destination(self, destination_id: int) -> List[Accommodation]:
        """Accommodations linked to a destination; the destination must exist"""
        self.get_destination(destination_id)
        return self.list_accommodations(destination_id)

    def get_accommodation(self, accommodation_id: int) -> Accommodation:
        accommodation = self.store.get_by_id(Accommodation, accommodation_id)
        if accommodation is None:
            raise NotFoundError("Accommodation", accommodation_id)
        return accommodation

    def create_accommodation(self, data: AccommodationCreate) -> Accommodation:
        destination = self.get_destination(data.destination_id)

        values = data.model_dump()
        if not values["location"]:
            values["location"] = destination.name

        accommodation = self.store.create(Accommodation, **values)
        logger.info(
            f"Accommodation created: {accommodation.id} ({accommodation.name}) "
            f"for destination {destination.id}"
        )
        return accommodation

    # Testimonials

    def list_testimonials(self) -> List[Testimonial]:
        return self.store.list(Testimonial)

    def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        testimonial = self.store.create(Testimonial, **data.model_dump())
        logger.info(f"Testimonial created: {testimonial.id} by {testimonial.name}")
        return testimonial
