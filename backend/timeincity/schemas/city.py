"""City Schemas — Pydantic models for city, search and region API responses.

Invariants:
    - Field names are snake_case; countryCode/state live only in the raw dataset
    - CityResponse.display_label always equals CityRecord.display_label
    - from_record() is the single CityRecord → API conversion point

Design Decisions:
    - CityDetailResponse nests metadata instead of flattening: page renderers
      consume record, clock and SEO blocks independently
"""

from pydantic import BaseModel

from timeincity.core.city_meta import CitySeoCopy, UtcOffset
from timeincity.core.city_record import CityRecord
from timeincity.core.domain_types import RegionTag
from timeincity.core.region_directory import RegionPage


class CityResponse(BaseModel):
    """A single catalog city."""
    slug: str
    name: str
    display_label: str
    country: str
    country_code: str | None = None
    state_or_region: str | None = None
    timezone: str
    lat: float
    lon: float
    population: float | None = None
    continent: RegionTag
    coordinates_missing: bool = False

    @classmethod
    def from_record(cls, city: CityRecord) -> "CityResponse":
        return cls(
            slug=city.slug,
            name=city.name,
            display_label=city.display_label,
            country=city.country,
            country_code=city.country_code,
            state_or_region=city.state_or_region,
            timezone=city.timezone,
            lat=city.lat,
            lon=city.lon,
            population=city.population,
            continent=city.continent,
            coordinates_missing=city.coordinates_missing,
        )


class UtcOffsetResponse(BaseModel):
    label: str
    observes_dst: bool

    @classmethod
    def from_offset(cls, offset: UtcOffset) -> "UtcOffsetResponse":
        return cls(label=offset.label, observes_dst=offset.observes_dst)


class SeoCopyResponse(BaseModel):
    title: str
    description: str
    heading: str
    intro: str
    paragraph: str
    location: str

    @classmethod
    def from_copy(cls, copy: CitySeoCopy) -> "SeoCopyResponse":
        return cls(
            title=copy.title,
            description=copy.description,
            heading=copy.heading,
            intro=copy.intro,
            paragraph=copy.paragraph,
            location=copy.location,
        )


class CityDetailResponse(BaseModel):
    """City page payload: record, UTC offset and SEO copy."""
    city: CityResponse
    utc_offset: UtcOffsetResponse
    seo: SeoCopyResponse


class CitySearchResponse(BaseModel):
    query: str
    limit: int
    results: list[CityResponse] = []


class CityListResponse(BaseModel):
    cities: list[CityResponse] = []


class RegionResponse(BaseModel):
    """Region directory page and its cities."""
    slug: str
    label: str
    path: str
    heading: str
    description: str
    paragraphs: list[str]
    meta_title: str
    meta_description: str
    cities: list[CityResponse] = []

    @classmethod
    def from_page(cls, page: RegionPage, cities: list[CityRecord]) -> "RegionResponse":
        return cls(
            slug=page.slug,
            label=page.label,
            path=page.path,
            heading=page.heading,
            description=page.description,
            paragraphs=list(page.paragraphs),
            meta_title=page.meta_title,
            meta_description=page.meta_description,
            cities=[CityResponse.from_record(city) for city in cities],
        )
