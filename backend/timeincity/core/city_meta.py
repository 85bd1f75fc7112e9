"""City Metadata — UTC offset labels, DST detection and SEO copy per city.

Invariants:
    - describe_utc_offset() never raises: unknown zones behave as UTC+00:00
    - DST observed iff January 1 and July 1 offsets differ
    - DST label lists the smaller offset as "winter", the larger as "summer"
      (hemisphere-agnostic)
    - format_utc_offset() always renders UTC±HH:MM with zero padding

Design Decisions:
    - zoneinfo over a third-party tz library: stdlib since 3.9, tzdata wheel
      covers hosts without a system zone database
    - year is a parameter so results are reproducible in tests
"""

from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timeincity.core.city_record import CityRecord


@dataclass(frozen=True)
class UtcOffset:
    label: str
    observes_dst: bool


@dataclass(frozen=True)
class CitySeoCopy:
    title: str
    description: str
    heading: str
    intro: str
    paragraph: str
    location: str


def format_utc_offset(minutes: int) -> str:
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"UTC{sign}{hours:02d}:{mins:02d}"


def _load_zone(name: str) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def _offset_minutes(zone: ZoneInfo | None, year: int, month: int) -> int:
    if zone is None:
        return 0
    offset = datetime(year, month, 1, tzinfo=zone).utcoffset()
    return int(offset.total_seconds() // 60) if offset is not None else 0


def describe_utc_offset(timezone: str, year: int | None = None) -> UtcOffset:
    """Offset label for a zone, e.g. 'UTC-06:00 in winter / UTC-05:00 in summer'."""
    if year is None:
        year = datetime.now(dt_timezone.utc).year
    zone = _load_zone(timezone)
    january = _offset_minutes(zone, year, 1)
    july = _offset_minutes(zone, year, 7)

    if january == july:
        return UtcOffset(label=format_utc_offset(january), observes_dst=False)

    winter, summer = min(january, july), max(january, july)
    return UtcOffset(
        label=(
            f"{format_utc_offset(winter)} in winter / "
            f"{format_utc_offset(summer)} in summer"
        ),
        observes_dst=True,
    )


def city_seo_copy(city: CityRecord) -> CitySeoCopy:
    """Page title, description and intro for a city page."""
    parts = [city.name, city.state_or_region, city.country]
    location = ", ".join(part for part in parts if part) or city.name
    country_suffix = f", {city.country}" if city.country else ""

    return CitySeoCopy(
        title=f"Current time in {city.name}{country_suffix} — TimeInCity",
        description=(
            f"See the current local time in {location}, plus weather, sunrise, "
            f"and sunset times. Compare time zones and share direct links with TimeInCity."
        ),
        heading=f"Current time in {city.name}",
        intro=(
            f"See the exact current time in {location}, including the local date, "
            f"time zone, weather, and sunrise and sunset times."
        ),
        paragraph=(
            f"Use TimeInCity to check what time it is right now in {location}, "
            f"plan calls across time zones, or share a simple link with teammates "
            f"when you schedule meetings or travel."
        ),
        location=location,
    )
