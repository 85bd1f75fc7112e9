"""City Record — canonical, immutable city entry shared by every consumer.

Invariants:
    - Frozen: no field changes after construction
    - continent always set (RegionTag, never None)
    - coordinates_missing=True means lat/lon are a (0, 0) placeholder
    - display_label derived on access, never stored

Design Decisions:
    - Frozen dataclass over Pydantic model: core/ stays free of boundary
      validation; schemas/ converts to API models (ADR: DDD boundary)
"""

from dataclasses import dataclass

from timeincity.core.city_display import format_city_display
from timeincity.core.domain_types import CitySlug, RegionTag


@dataclass(frozen=True)
class CityRecord:
    """One normalized city."""

    name: str
    slug: CitySlug
    country: str
    timezone: str
    lat: float
    lon: float
    continent: RegionTag
    country_code: str | None = None
    state_or_region: str | None = None
    population: float | None = None
    coordinates_missing: bool = False

    @property
    def display_label(self) -> str:
        return format_city_display(
            self.name, self.state_or_region, self.country, self.country_code,
        )
