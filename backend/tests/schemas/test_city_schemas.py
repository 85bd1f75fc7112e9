"""City Schemas tests — CityRecord → API model conversion."""

from timeincity.core.city_catalog import build_catalog
from timeincity.core.region_directory import REGION_PAGES
from timeincity.schemas.city import CityResponse, RegionResponse

CATALOG = build_catalog([
    {"name": "Austin", "country": "United States", "countryCode": "US",
     "state": "Texas", "timezone": "America/Chicago", "lat": 30.27, "lon": -97.74,
     "population": 978908},
])


def test_city_response_from_record():
    response = CityResponse.from_record(CATALOG.cities[0])
    assert response.slug == "austin"
    assert response.display_label == "Austin, Texas, USA"
    assert response.country_code == "US"
    assert response.model_dump()["continent"] == "united-states"


def test_region_response_from_page():
    response = RegionResponse.from_page(
        REGION_PAGES["united-states"], list(CATALOG.cities),
    )
    assert response.label == "United States"
    assert [c.name for c in response.cities] == ["Austin"]


def test_region_response_carries_meta_copy():
    page = REGION_PAGES["united-states"]
    response = RegionResponse.from_page(page, [])
    assert response.meta_title == page.meta_title
    assert response.paragraphs == list(page.paragraphs)
    assert response.cities == []
