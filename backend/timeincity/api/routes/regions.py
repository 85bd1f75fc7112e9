"""Region Routes — directory pages grouped by RegionTag.

Invariants:
    - GET /api/v1/regions/{region_slug} → page + name-sorted cities
    - GET /api/v1/regions?path=/cities/<tag> resolves a directory path to the same page
    - Unknown region slug or path → 404 (never an empty page)
"""

from fastapi import APIRouter, Depends, Query

from timeincity.api.dependencies import get_catalog
from timeincity.core.city_catalog import CityCatalog
from timeincity.core.errors import ResourceNotFoundError
from timeincity.core.region_directory import (
    REGION_PAGES, cities_in_region, region_by_path,
)
from timeincity.schemas.city import RegionResponse

router = APIRouter(prefix="/api/v1/regions", tags=["regions"])


def _region_response(catalog: CityCatalog, region_slug: str | None, requested: str):
    page = REGION_PAGES.get(region_slug) if region_slug else None
    if page is None:
        raise ResourceNotFoundError("Region", requested)
    return RegionResponse.from_page(page, cities_in_region(catalog, page.slug))


@router.get("", response_model=RegionResponse)
async def get_region_by_path(
    path: str = Query(..., min_length=1, max_length=200),
    catalog: CityCatalog = Depends(get_catalog),
):
    return _region_response(catalog, region_by_path(path), path)


@router.get("/{region_slug}", response_model=RegionResponse)
async def get_region(region_slug: str, catalog: CityCatalog = Depends(get_catalog)):
    return _region_response(catalog, region_slug.lower(), region_slug)
