"""Nearest City tests — great-circle distance, nearest lookup, timezone guess.

Tests cover:
    - haversine_km: zero distance, known city pair within tolerance
    - nearest_city picks the closest, skips coordinates_missing records
    - Ties resolve to the earlier city; empty input → None
    - guess_city_for_timezone returns the first match or None
    - featured_cities keeps configured order and skips unknown slugs
"""

import pytest

from timeincity.core.city_catalog import build_catalog
from timeincity.core.nearest_city import (
    featured_cities, guess_city_for_timezone, haversine_km, nearest_city,
)

CATALOG = build_catalog([
    {"name": "London", "country": "United Kingdom", "countryCode": "GB",
     "timezone": "Europe/London", "lat": 51.5074, "lon": -0.1278},
    {"name": "Paris", "country": "France", "countryCode": "FR",
     "timezone": "Europe/Paris", "lat": 48.8566, "lon": 2.3522},
    {"name": "Lyon", "country": "France", "countryCode": "FR",
     "timezone": "Europe/Paris", "lat": 45.764, "lon": 4.8357},
    {"name": "Null Island", "country": "Nowhere", "timezone": "Etc/UTC"},
])


def test_haversine_zero_distance():
    assert haversine_km(10.0, 20.0, 10.0, 20.0) == 0.0


def test_haversine_london_paris():
    assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(344, abs=5)


def test_nearest_city_picks_closest():
    assert nearest_city(CATALOG.cities, 48.0, 2.0).name == "Paris"
    assert nearest_city(CATALOG.cities, 52.0, 0.0).name == "London"


def test_nearest_city_skips_missing_coordinates():
    # (0, 0) is where the placeholder record would sit
    assert nearest_city(CATALOG.cities, 0.0, 0.0).name != "Null Island"


def test_nearest_city_tie_goes_to_earlier():
    catalog = build_catalog([
        {"name": "East", "timezone": "Etc/UTC", "lat": 0.0, "lon": 1.0},
        {"name": "West", "timezone": "Etc/UTC", "lat": 0.0, "lon": -1.0},
    ])
    assert nearest_city(catalog.cities, 0.0, 0.0).name == "East"


def test_nearest_city_empty_input():
    assert nearest_city([], 1.0, 1.0) is None


def test_guess_city_for_timezone_first_match():
    assert guess_city_for_timezone(CATALOG.cities, "Europe/Paris").name == "Paris"


def test_guess_city_for_timezone_no_match():
    assert guess_city_for_timezone(CATALOG.cities, "Asia/Tokyo") is None
    assert guess_city_for_timezone(CATALOG.cities, "") is None


def test_featured_cities_order_and_filtering():
    cities = featured_cities(CATALOG, ["paris", "atlantis", "london"])
    assert [c.name for c in cities] == ["Paris", "London"]
