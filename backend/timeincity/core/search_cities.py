"""City Search — case-insensitive substring lookup over the catalog.

Invariants:
    - Pure function: no IO, no async
    - len(result) <= limit; limit < 1 raises InvalidSearchLimitError
    - Blank query → first `limit` entries of the name-sorted view
    - Haystack: name, country, state_or_region (if present), timezone — lowercase,
      space-joined; a city matches if the trimmed lowercase query is a substring
    - Matches ordered by display_label collation key; stable sort keeps catalog
      order for identical labels (deterministic)

Design Decisions:
    - Simple substring matching (not fuzzy/semantic) — predictable, fast, testable
    - No tokenization: "new york" matches only that exact run of characters
"""

from collections.abc import Sequence

from timeincity.core.city_display import collation_key
from timeincity.core.city_record import CityRecord
from timeincity.core.domain_types import DEFAULT_SEARCH_LIMIT
from timeincity.core.errors import ErrorContext, InvalidSearchLimitError


def _haystack(city: CityRecord) -> str:
    parts = [city.name, city.country, city.state_or_region, city.timezone]
    return " ".join(part for part in parts if part).lower()


def sort_by_name(cities: Sequence[CityRecord]) -> list[CityRecord]:
    """Name-ordered copy, same collation as search results."""
    return sorted(cities, key=lambda city: collation_key(city.name))


def search_cities(
    cities: Sequence[CityRecord],
    sorted_by_name: Sequence[CityRecord],
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[CityRecord]:
    """Return up to `limit` cities matching `query`, ordered by display label."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidSearchLimitError(limit, ErrorContext(query=query))

    normalized = (query or "").strip().lower()
    if not normalized:
        return list(sorted_by_name[:limit])

    matches = [city for city in cities if normalized in _haystack(city)]
    matches.sort(key=lambda city: collation_key(city.display_label))
    return matches[:limit]
