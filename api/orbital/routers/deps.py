"""
Service Dependencies shared by the routers
"""
from fastapi import Depends, Request

from orbital.services.booking_service import BookingService
from orbital.services.catalog_service import CatalogService
from orbital.services.user_service import UserService
from orbital.utils.store import EntityStore, get_store


def get_catalog_service(store: EntityStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_user_service(store: EntityStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_booking_service(
    request: Request,
    store: EntityStore = Depends(get_store),
) -> BookingService:
    return BookingService(store, request.app.state.settings)
