"""
Testimonial Endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List

from orbital.routers.deps import get_catalog_service
from orbital.schemas.testimonial import TestimonialCreate, TestimonialResponse
from orbital.services.catalog_service import CatalogService
from orbital.utils.redis import CatalogCache, get_redis

router = APIRouter()


@router.get("", response_model=List[TestimonialResponse])
async def list_testimonials(
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    cache_key = cache.key("testimonials")

    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    response = [
        TestimonialResponse.model_validate(t).model_dump(mode="json")
        for t in catalog.list_testimonials()
    ]
    await cache.set(cache_key, response)
    return response


@router.post("", response_model=TestimonialResponse, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    testimonial_data: TestimonialCreate,
    catalog: CatalogService = Depends(get_catalog_service),
    cache: CatalogCache = Depends(get_redis),
):
    testimonial = catalog.create_testimonial(testimonial_data)
    await cache.invalidate("testimonials")
    return testimonial
