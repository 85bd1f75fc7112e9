"""City Metadata tests — UTC offset labels, DST detection and SEO copy.

Tests cover:
    - format_utc_offset zero-pads and signs
    - Northern and southern hemisphere DST labels (smaller offset = "winter")
    - Fixed-offset zones, half-hour and quarter-hour offsets
    - Unknown and empty zones fall back to UTC+00:00 without raising
    - SEO copy location built from name/region/country
"""

import pytest

from timeincity.core.city_meta import city_seo_copy, describe_utc_offset, format_utc_offset
from timeincity.core.normalize_cities import normalize_city


@pytest.mark.parametrize("minutes,expected", [
    (0, "UTC+00:00"),
    (540, "UTC+09:00"),
    (-300, "UTC-05:00"),
    (330, "UTC+05:30"),
    (345, "UTC+05:45"),
    (-210, "UTC-03:30"),
])
def test_format_utc_offset(minutes, expected):
    assert format_utc_offset(minutes) == expected


def test_northern_hemisphere_dst():
    offset = describe_utc_offset("America/Chicago", 2024)
    assert offset.observes_dst is True
    assert offset.label == "UTC-06:00 in winter / UTC-05:00 in summer"


def test_southern_hemisphere_dst_lists_smaller_offset_first():
    offset = describe_utc_offset("Australia/Sydney", 2024)
    assert offset.observes_dst is True
    assert offset.label == "UTC+10:00 in winter / UTC+11:00 in summer"


def test_fixed_offset_zone():
    offset = describe_utc_offset("Asia/Tokyo", 2024)
    assert offset.observes_dst is False
    assert offset.label == "UTC+09:00"


def test_half_hour_zone():
    assert describe_utc_offset("Asia/Kolkata", 2024).label == "UTC+05:30"


@pytest.mark.parametrize("timezone", ["Not/AZone", "", "../../etc/passwd"])
def test_unknown_zone_falls_back_to_utc(timezone):
    offset = describe_utc_offset(timezone, 2024)
    assert offset.label == "UTC+00:00"
    assert offset.observes_dst is False


def test_default_year_is_current():
    assert describe_utc_offset("Asia/Tokyo").label == "UTC+09:00"


def test_seo_copy_with_region():
    city = normalize_city({
        "name": "Austin", "state": "Texas", "country": "United States",
        "countryCode": "US", "timezone": "America/Chicago", "lat": 30.2, "lon": -97.7,
    })
    copy = city_seo_copy(city)
    assert copy.location == "Austin, Texas, United States"
    assert copy.title == "Current time in Austin, United States — TimeInCity"
    assert copy.heading == "Current time in Austin"
    assert "Austin, Texas, United States" in copy.intro
    assert "right now in Austin, Texas, United States" in copy.paragraph


def test_seo_copy_without_country():
    city = normalize_city({"name": "Nowhere", "timezone": "Etc/UTC", "lat": 1, "lon": 1})
    copy = city_seo_copy(city)
    assert copy.location == "Nowhere"
    assert copy.title == "Current time in Nowhere — TimeInCity"
