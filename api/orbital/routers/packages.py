"""
Travel Package Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List

from orbital.routers.deps import get_catalog_service
from orbital.schemas.package import PackageCreate, PackageResponse
from orbital.services.catalog_service import CatalogService
from orbital.utils.redis import CatalogCache, get_redis

router = APIRouter()


@router.get("", response_model=List[PackageResponse])
async def list_packages(
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    """
    List all travel packages
    """
    cache_key = cache.key("packages")

    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    response = [
        PackageResponse.model_validate(p).model_dump(mode="json")
        for p in catalog.list_packages()
    ]
    await cache.set(cache_key, response)
    return response


@router.get("/{package_id}", response_model=PackageResponse)
async def get_package(
    package_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.get_package(package_id)


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    package_data: PackageCreate,
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    package = catalog.create_package(package_data)
    await cache.invalidate("packages")
    return package
