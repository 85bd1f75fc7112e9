"""Region Directory — browseable city listings per RegionTag.

Invariants:
    - One page per RegionTag plus ALL_CITIES_PAGE ("/cities")
    - Region paths are "/cities/<region-tag>"
    - Every page carries at least one body paragraph; description == paragraphs[0]
    - cities_in_region() is name-sorted with the search collation key
    - Unknown region slug or path → empty list / None, never an exception
"""

from dataclasses import dataclass

from timeincity.core.city_catalog import CityCatalog
from timeincity.core.city_record import CityRecord
from timeincity.core.domain_types import ALL_CITIES_PAGE, RegionTag


@dataclass(frozen=True)
class RegionPage:
    slug: str
    label: str
    path: str
    heading: str
    paragraphs: tuple[str, ...]
    meta_title: str
    meta_description: str

    @property
    def description(self) -> str:
        return self.paragraphs[0]


def _page(
    slug: str, label: str, heading: str, paragraphs: tuple[str, ...],
    meta_title: str, meta_description: str,
) -> RegionPage:
    path = "/cities" if slug == ALL_CITIES_PAGE else f"/cities/{slug}"
    return RegionPage(
        slug=slug, label=label, path=path, heading=heading,
        paragraphs=paragraphs, meta_title=meta_title,
        meta_description=meta_description,
    )


_PAGES = (
    _page(
        ALL_CITIES_PAGE, "All Cities",
        "All Cities — Worldwide Time & Weather",
        (
            "Current local time, UTC offsets and sunrise/sunset for every city "
            "in the directory, from world capitals to regional hubs.",
            "Browse alphabetically or filter by continent. Share a city link so "
            "everyone you work with sees the same live clock.",
        ),
        "Current Time in Every City — Global Directory | TimeInCity",
        "Browse every city to see current local time, weather, sunrise, sunset "
        "and UTC offsets.",
    ),
    _page(
        RegionTag.UNITED_STATES.value, "United States",
        "Current Time in United States Cities",
        (
            "The United States spans multiple time zones, from Eastern Time "
            "to Hawaii Time.",
            "Use it to coordinate meetings, plan travel, or compare regional "
            "time differences across the country.",
        ),
        "Current Time in United States Cities — Major Time Zones",
        "Current time, weather and sunrise/sunset across major United States "
        "cities in every U.S. time zone.",
    ),
    _page(
        RegionTag.NORTH_AMERICA.value, "North America",
        "Current Time in North American Cities",
        (
            "Canada, Mexico, Central America and the Caribbean, from "
            "Newfoundland Time to Pacific Time.",
        ),
        "Current Time in North America — Canada, Mexico & Caribbean",
        "Local times and daylight information for North American cities "
        "outside the United States.",
    ),
    _page(
        RegionTag.SOUTH_AMERICA.value, "South America",
        "Current Time in South American Cities",
        (
            "Tropical regions, mountain cities and southern latitudes with "
            "varied time zones.",
            "Explore current times and daylight information for key South "
            "American locations.",
        ),
        "Current Time in South America — Major Cities",
        "Current local times and daylight data for major South American cities.",
    ),
    _page(
        RegionTag.EUROPE.value, "Europe",
        "Current Time in European Cities",
        (
            "Europe spans several time zones from UTC to Eastern European Time.",
            "See live local times and daylight saving shifts across Europe's "
            "capitals and major destinations.",
        ),
        "Current Time in Europe — Major Cities & Time Zones",
        "Current local times and daylight information for major European "
        "cities across multiple time zones.",
    ),
    _page(
        RegionTag.AFRICA.value, "Africa",
        "Current Time in African Cities",
        ("Africa spans several time zones and features dynamic climates.",),
        "Current Time in Africa — Major Cities",
        "Accurate local times across Africa's largest and fastest-growing cities.",
    ),
    _page(
        RegionTag.ASIA.value, "Asia",
        "Current Time in Asian Cities",
        (
            "The world's largest continent, with time zones stretching from "
            "the Middle East to Tokyo.",
            "View accurate local times and sunrise/sunset data for major Asian "
            "cities.",
        ),
        "Current Time in Asia — Major Cities & Time Zones",
        "Local times, UTC offsets and daylight data for major Asian cities.",
    ),
    _page(
        RegionTag.OCEANIA.value, "Oceania",
        "Current Time in Oceania",
        ("Australia, New Zealand and Pacific Island nations.",),
        "Current Time in Oceania — Australia, New Zealand & Pacific",
        "Full time zone and sunrise/sunset data for cities across Oceania.",
    ),
)

REGION_PAGES: dict[str, RegionPage] = {page.slug: page for page in _PAGES}


def region_by_path(pathname: str) -> str | None:
    """Region slug for a directory path; trailing slashes and case ignored."""
    normalized = pathname.strip().lower().rstrip("/") or "/"
    for page in REGION_PAGES.values():
        if page.path == normalized:
            return page.slug
    return None


def cities_in_region(catalog: CityCatalog, region_slug: str) -> list[CityRecord]:
    if region_slug == ALL_CITIES_PAGE:
        return list(catalog.sorted_by_name)
    if region_slug not in REGION_PAGES:
        return []
    # sorted_by_name is already ordered; filtering keeps that order
    return [city for city in catalog.sorted_by_name if city.continent.value == region_slug]
