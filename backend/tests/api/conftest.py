"""API test fixtures — FastAPI test client over a small in-test catalog.

Invariants:
    - Every test gets a fresh catalog on app.state (lifespan is not run by ASGITransport)
    - get_settings overridden so search limits are fixed regardless of env
    - app.state.catalog reset after each test

Design Decisions:
    - In-test raw data instead of the bundled dataset: assertions stay stable
      when the dataset grows
"""

import pytest
from httpx import ASGITransport, AsyncClient

from timeincity.config import Settings, get_settings
from timeincity.core.city_catalog import build_catalog
from timeincity.main import app

RAW_CITIES = [
    {"name": "New York", "slug": "new-york", "country": "United States",
     "countryCode": "US", "state": "New York", "timezone": "America/New_York",
     "lat": 40.7128, "lon": -74.006},
    {"name": "New London", "country": "United States", "countryCode": "US",
     "timezone": "America/New_York", "lat": 41.3557, "lon": -72.0995},
    {"name": "London", "slug": "london", "country": "United Kingdom",
     "countryCode": "GB", "state": "England", "timezone": "Europe/London",
     "lat": 51.5074, "lon": -0.1278},
    {"name": "London", "country": "Canada", "countryCode": "CA",
     "state": "Ontario", "timezone": "America/Toronto",
     "lat": 42.9849, "lon": -81.2453},
    {"name": "Paris", "slug": "paris", "country": "France", "countryCode": "FR",
     "timezone": "Europe/Paris", "lat": 48.8566, "lon": 2.3522},
    {"name": "Tokyo", "slug": "tokyo", "country": "Japan", "countryCode": "JP",
     "timezone": "Asia/Tokyo", "lat": 35.6762, "lon": 139.6503},
    {"name": "Sydney", "slug": "sydney", "country": "Australia",
     "countryCode": "AU", "state": "New South Wales",
     "timezone": "Australia/Sydney", "lat": -33.8688, "lon": 151.2093},
    {"name": "McMurdo Station", "slug": "mcmurdo", "country": "Antarctica",
     "timezone": "Antarctica/McMurdo"},
]


def _test_settings() -> Settings:
    return Settings(
        search_default_limit=3,
        search_max_limit=5,
        featured_city_slugs=["tokyo", "atlantis", "new-york"],
    )


@pytest.fixture
def catalog():
    return build_catalog(RAW_CITIES)


@pytest.fixture
async def client(catalog):
    """FastAPI test client with the in-test catalog installed."""
    app.state.catalog = catalog
    app.dependency_overrides[get_settings] = _test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.catalog = None


@pytest.fixture
async def client_without_catalog():
    app.state.catalog = None
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
