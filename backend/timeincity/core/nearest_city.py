"""Nearest City & Timezone Guess — location-based fallbacks for "use my location".

Invariants:
    - Records with coordinates_missing are never returned by nearest_city()
    - Ties resolve to the earlier city in catalog order
    - Empty candidate list → None
"""

import math
from collections.abc import Iterable, Sequence

from timeincity.core.city_catalog import CityCatalog
from timeincity.core.city_record import CityRecord

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def nearest_city(
    cities: Iterable[CityRecord], lat: float, lon: float,
) -> CityRecord | None:
    best: CityRecord | None = None
    best_distance = math.inf
    for city in cities:
        if city.coordinates_missing:
            continue
        distance = haversine_km(lat, lon, city.lat, city.lon)
        if distance < best_distance:
            best, best_distance = city, distance
    return best


def guess_city_for_timezone(
    cities: Iterable[CityRecord], timezone: str,
) -> CityRecord | None:
    """First city in the given zone, e.g. the browser's resolved timezone."""
    if not timezone:
        return None
    return next((city for city in cities if city.timezone == timezone), None)


def featured_cities(catalog: CityCatalog, slugs: Sequence[str]) -> list[CityRecord]:
    """Configured featured slugs that exist in the catalog, in configured order."""
    return [catalog.configs[slug] for slug in slugs if slug in catalog.configs]
