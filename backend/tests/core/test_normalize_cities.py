"""Normalizer tests — raw dataset entries to CityRecord.

Tests cover:
    - Order preserved, nothing dropped
    - Slug derived from name when absent/empty; provided slug re-slugified
    - Missing or non-numeric coordinates → (0, 0) flagged, with a warning
    - Legitimate zero coordinates are not flagged
    - Country code upper-cased, continent always populated
    - snake_case aliases accepted
    - Deterministic output
"""

import logging

from timeincity.core.domain_types import RegionTag
from timeincity.core.normalize_cities import normalize_cities, normalize_city


def _raw(**overrides) -> dict:
    entry = {
        "name": "New York",
        "country": "United States",
        "countryCode": "US",
        "state": "NY",
        "timezone": "America/New_York",
        "lat": 40.7128,
        "lon": -74.006,
    }
    entry.update(overrides)
    return entry


def test_end_to_end_new_york_record():
    city = normalize_city(_raw())
    assert city.slug == "new-york"
    assert city.continent == RegionTag.UNITED_STATES
    assert city.state_or_region == "NY"
    assert city.lat == 40.7128
    assert city.coordinates_missing is False


def test_order_preserved_and_nothing_dropped():
    raw = [_raw(name="B"), _raw(name="A"), _raw(name="B")]
    names = [city.name for city in normalize_cities(raw)]
    assert names == ["B", "A", "B"]


def test_empty_slug_derived_from_name():
    assert normalize_city(_raw(slug="")).slug == "new-york"


def test_provided_slug_is_reslugified():
    assert normalize_city(_raw(slug="NYC Metro")).slug == "nyc-metro"


def test_missing_coordinates_default_to_zero_and_flag(caplog):
    entry = _raw()
    del entry["lat"]
    with caplog.at_level(logging.WARNING):
        city = normalize_city(entry)
    assert (city.lat, city.lon) == (0.0, 0.0)
    assert city.coordinates_missing is True
    assert "no usable coordinates" in caplog.text


def test_non_numeric_coordinates_are_treated_as_missing():
    city = normalize_city(_raw(lat="north", lon=None))
    assert (city.lat, city.lon) == (0.0, 0.0)
    assert city.coordinates_missing is True


def test_numeric_strings_are_accepted():
    city = normalize_city(_raw(lat="51.5", lon="-0.12"))
    assert city.lat == 51.5
    assert city.coordinates_missing is False


def test_real_zero_coordinates_are_not_flagged():
    city = normalize_city(_raw(lat=0, lon=0))
    assert city.coordinates_missing is False


def test_country_code_upper_cased():
    assert normalize_city(_raw(countryCode=" gb ")).country_code == "GB"


def test_missing_optional_fields_are_none():
    entry = {"name": "Atlantis", "country": "", "timezone": "", "lat": 1, "lon": 2}
    city = normalize_city(entry)
    assert city.country_code is None
    assert city.state_or_region is None
    assert city.population is None
    assert city.continent == RegionTag.ASIA


def test_missing_timezone_never_raises():
    entry = _raw()
    del entry["timezone"]
    city = normalize_city(entry)
    assert city.timezone == ""
    assert city.continent == RegionTag.UNITED_STATES


def test_snake_case_aliases_accepted():
    entry = _raw()
    del entry["countryCode"], entry["state"]
    entry["country_code"] = "us"
    entry["state_or_region"] = "New York"
    city = normalize_city(entry)
    assert city.country_code == "US"
    assert city.state_or_region == "New York"


def test_population_kept_as_hint():
    assert normalize_city(_raw(population=8336817)).population == 8336817


def test_normalize_is_deterministic():
    raw = [_raw(), _raw(name="Boston", slug=None)]
    assert normalize_cities(raw) == normalize_cities(raw)


def test_one_missing_coordinate_zeroes_both():
    entry = _raw()
    del entry["lon"]
    city = normalize_city(entry)
    assert (city.lat, city.lon) == (0.0, 0.0)
    assert city.coordinates_missing is True


def test_unusable_provided_slug_falls_back_to_name():
    assert normalize_city(_raw(slug="---")).slug == "new-york"
    assert normalize_city(_raw(name="Tokyo", slug="東京")).slug == "tokyo"
