"""
Accommodation Endpoints
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from orbital.routers.deps import get_catalog_service
from orbital.schemas.accommodation import AccommodationCreate, AccommodationResponse
from orbital.services.catalog_service import CatalogService
from orbital.utils.redis import CatalogCache, get_redis

router = APIRouter()


@router.get("", response_model=List[AccommodationResponse])
async def list_accommodations(
    destination_id: Optional[int] = Query(None, description="Only accommodations at this destination"),
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    List accommodations, optionally filtered by destination
    """
    cache_key = cache.key(
        "accommodations", "all" if destination_id is None else f"destination={destination_id}"
    )

    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    response = [
        AccommodationResponse.model_validate(a).model_dump(mode="json")
        for a in catalog.list_accommodations(destination_id)
    ]
    await cache.set(cache_key, response)
    return response


@router.get("/{accommodation_id}", response_model=AccommodationResponse)
async def get_accommodation(
    accommodation_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.get_accommodation(accommodation_id)


@router.post("", response_model=AccommodationResponse, status_code=status.HTTP_201_CREATED)
async def create_accommodation(
    accommodation_data: AccommodationCreate,
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    Add an accommodation; its destination must exist
    """
    accommodation = catalog.create_accommodation(accommodation_data)
    await cache.invalidate("accommodations")
    return accommodation
