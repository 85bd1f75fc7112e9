"""City Routes — search, lookup, featured list and location fallbacks.

Invariants:
    - Lookups that return None become ResourceNotFoundError (404) here, never in core/
    - Search limit: 1..search_max_limit (larger values clamped), default search_default_limit
    - Fixed paths (featured, nearest, by-timezone) registered before /{slug}

Design Decisions:
    - Catalog injected via get_catalog dependency: routes stay stateless
    - Slug path segment passed raw to find_city_by_slug (it slugifies), so
      /cities/New%20York and /cities/new-york resolve identically
"""

import logging

from fastapi import APIRouter, Depends, Query

from timeincity.api.dependencies import get_catalog
from timeincity.config import Settings, get_settings
from timeincity.core.city_catalog import CityCatalog
from timeincity.core.city_meta import city_seo_copy, describe_utc_offset
from timeincity.core.errors import ErrorContext, ResourceNotFoundError
from timeincity.core.nearest_city import (
    featured_cities, guess_city_for_timezone, nearest_city,
)
from timeincity.schemas.city import (
    CityDetailResponse, CityListResponse, CityResponse, CitySearchResponse,
    SeoCopyResponse, UtcOffsetResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cities", tags=["cities"])


@router.get("", response_model=CitySearchResponse)
async def search_cities(
    q: str = Query("", max_length=200),
    limit: int | None = Query(None, ge=1),
    catalog: CityCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Substring search; blank query returns the first cities by name."""
    effective = min(limit or settings.search_default_limit, settings.search_max_limit)
    results = catalog.search_cities(q, effective)
    return CitySearchResponse(
        query=q,
        limit=effective,
        results=[CityResponse.from_record(city) for city in results],
    )


@router.get("/featured", response_model=CityListResponse)
async def list_featured_cities(
    catalog: CityCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    cities = featured_cities(catalog, settings.featured_city_slugs)
    return CityListResponse(cities=[CityResponse.from_record(c) for c in cities])


@router.get("/nearest", response_model=CityResponse)
async def get_nearest_city(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    catalog: CityCatalog = Depends(get_catalog),
):
    """Closest city by great-circle distance ("use my location")."""
    city = nearest_city(catalog.cities, lat, lon)
    if city is None:
        raise ResourceNotFoundError("City near", f"{lat},{lon}")
    return CityResponse.from_record(city)


@router.get("/by-timezone", response_model=CityResponse)
async def get_city_for_timezone(
    timezone: str = Query(..., min_length=1, max_length=100),
    catalog: CityCatalog = Depends(get_catalog),
):
    """Default city for a browser-resolved IANA timezone."""
    city = guess_city_for_timezone(catalog.cities, timezone)
    if city is None:
        raise ResourceNotFoundError("City in timezone", timezone)
    return CityResponse.from_record(city)


@router.get("/{slug}", response_model=CityDetailResponse)
async def get_city(slug: str, catalog: CityCatalog = Depends(get_catalog)):
    """City page payload by any candidate slug or raw path segment."""
    city = catalog.find_city_by_slug(slug)
    if city is None:
        logger.info(f"City not found: {slug}", extra={"slug": slug})
        raise ResourceNotFoundError("City", slug, ErrorContext(slug=slug))
    return CityDetailResponse(
        city=CityResponse.from_record(city),
        utc_offset=UtcOffsetResponse.from_offset(describe_utc_offset(city.timezone)),
        seo=SeoCopyResponse.from_copy(city_seo_copy(city)),
    )
