"""City Record Normalizer — raw dataset entries to CityRecord.

Invariants:
    - Output order == input order, len(output) == len(input) (nothing dropped here)
    - Never raises on missing/malformed fields: substitutes defaults
    - Either coordinate missing or non-numeric → both set to 0.0 with
      coordinates_missing=True (never a half-real location)
    - Canonical slug is always in slugify() form (provided slug re-slugified;
      absent or unusable slug derived from name)
    - Deterministic for a given input

Design Decisions:
    - Accepts camelCase keys of the published JSON dataset (countryCode, state)
      and snake_case aliases (country_code, state_or_region)
    - (0, 0) substitution kept for catalog availability; the flag lets
      location-sensitive consumers skip the record instead of trusting it
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from timeincity.core.city_record import CityRecord
from timeincity.core.region_classifier import classify_region
from timeincity.core.slugify import slugify

logger = logging.getLogger(__name__)


def _text(raw: Mapping[str, Any], *keys: str) -> str | None:
    """First non-empty string value among keys, trimmed."""
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _coerce_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def normalize_city(raw: Mapping[str, Any]) -> CityRecord:
    """Normalize one raw dataset entry."""
    name = _text(raw, "name") or ""
    timezone = _text(raw, "timezone") or ""
    country_code = _text(raw, "countryCode", "country_code")
    if country_code is not None:
        country_code = country_code.upper()
    state = _text(raw, "state", "state_or_region", "stateOrRegion")

    provided_slug = _text(raw, "slug")
    # a provided slug with no ASCII letters or digits falls back to the name
    slug = (slugify(provided_slug) if provided_slug else "") or slugify(name)

    lat = _coerce_float(raw.get("lat"))
    lon = _coerce_float(raw.get("lon"))
    coordinates_missing = lat is None or lon is None
    if coordinates_missing:
        logger.warning(
            f"City '{name}' has no usable coordinates, substituting (0, 0)",
            extra={"slug": slug, "city_name": name},
        )
        lat, lon = 0.0, 0.0

    return CityRecord(
        name=name,
        slug=slug,
        country=_text(raw, "country") or "",
        timezone=timezone,
        lat=lat,
        lon=lon,
        continent=classify_region(country_code, timezone),
        country_code=country_code,
        state_or_region=state,
        population=_coerce_float(raw.get("population")),
        coordinates_missing=coordinates_missing,
    )


def normalize_cities(raw: Iterable[Mapping[str, Any]]) -> list[CityRecord]:
    """Normalize a raw dataset, preserving order."""
    return [normalize_city(entry) for entry in raw]
