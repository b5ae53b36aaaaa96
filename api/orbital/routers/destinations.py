"""
Destination Catalog Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List
import logging

from orbital.routers.deps import get_catalog_service
from orbital.schemas.accommodation import AccommodationResponse
from orbital.schemas.destination import DestinationCreate, DestinationResponse
from orbital.services.catalog_service import CatalogService
from orbital.utils.redis import CatalogCache, get_redis

router = APIRouter()
logger = logging.getLogger(__name__)


def _serialize(destinations) -> List[dict]:
    return [
        DestinationResponse.model_validate(d).model_dump(mode="json")
        for d in destinations
    ]


@router.get("", response_model=List[DestinationResponse])
async def list_destinations(
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    List all destinations
    """
    cache_key = cache.key("destinations")

    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    response = _serialize(catalog.list_destinations())
    await cache.set(cache_key, response)
    return response


@router.get("/featured", response_model=List[DestinationResponse])
async def list_featured_destinations(
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    List destinations flagged as featured
    """
    cache_key = cache.key("destinations", "featured")

    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    response = _serialize(catalog.featured_destinations())
    await cache.set(cache_key, response)
    return response


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(
    destination_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Get a single destination
    """
    return catalog.get_destination(destination_id)


@router.get("/{destination_id}/accommodations", response_model=List[AccommodationResponse])
async def list_destination_accommodations(
    destination_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Accommodations available at a destination
    """
    return catalog.accommodations_for_destination(destination_id)


@router.post("", response_model=DestinationResponse, status_code=status.HTTP_201_CREATED)
async def create_destination(
    destination_data: DestinationCreate,
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    Add a destination to the catalog
    """
    destination = catalog.create_destination(destination_data)
    await cache.invalidate("destinations")
    return destination
