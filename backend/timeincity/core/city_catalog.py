"""City Catalog — immutable composition of normalizer, slug index and search.

Invariants:
    - Built once by build_catalog(); never mutated afterwards (safe for
      concurrent readers without locks)
    - cities: unique canonical slugs, raw input order (first occurrence wins)
    - configs: canonical slug → city, same records as `cities`
    - index: built from ALL normalized records, so a record dropped from
      `cities` as a duplicate stays reachable through its other candidates
    - Records with an empty canonical slug (no usable name/slug) are skipped

Design Decisions:
    - Explicit build function over import-time module globals: the composition
      root (FastAPI lifespan) owns construction and injects the catalog
    - Name-sorted view computed once at build, reused by empty-query search and
      the all-cities directory page
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from timeincity.core.city_index import CityIndex, SlugCollision, build_index, find_by_slug
from timeincity.core.city_record import CityRecord
from timeincity.core.domain_types import DEFAULT_SEARCH_LIMIT
from timeincity.core.normalize_cities import normalize_cities
from timeincity.core import search_cities as search_module

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityCatalog:
    """Read-only city catalog shared by every request handler."""

    cities: tuple[CityRecord, ...]
    configs: Mapping[str, CityRecord]
    index: CityIndex
    sorted_by_name: tuple[CityRecord, ...]
    duplicates: tuple[CityRecord, ...] = ()

    @property
    def collisions(self) -> tuple[SlugCollision, ...]:
        return self.index.collisions

    def __len__(self) -> int:
        return len(self.cities)

    def find_city_by_slug(self, value: str) -> CityRecord | None:
        """Resolve a URL path segment or free text; None when unknown."""
        return find_by_slug(self.index, value)

    def search_cities(
        self, query: str, limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[CityRecord]:
        return search_module.search_cities(
            self.cities, self.sorted_by_name, query, limit,
        )


def build_catalog(raw: Iterable[Mapping[str, Any]]) -> CityCatalog:
    """Normalize raw entries and index them. The only way to get a catalog."""
    records = normalize_cities(raw)

    configs: dict[str, CityRecord] = {}
    duplicates: list[CityRecord] = []
    for record in records:
        if not record.slug:
            logger.warning(
                "Skipping city without a usable name or slug",
                extra={"city_name": record.name},
            )
            continue
        if record.slug in configs:
            duplicates.append(record)
            logger.warning(
                f"Duplicate canonical slug '{record.slug}': keeping first "
                f"'{configs[record.slug].display_label}', "
                f"dropping '{record.display_label}'",
                extra={"slug": record.slug},
            )
            continue
        configs[record.slug] = record

    index = build_index(r for r in records if r.slug)
    cities = tuple(configs.values())

    catalog = CityCatalog(
        cities=cities,
        configs=MappingProxyType(configs),
        index=index,
        sorted_by_name=tuple(search_module.sort_by_name(cities)),
        duplicates=tuple(duplicates),
    )
    logger.info(
        f"City catalog built: {len(cities)} cities, {len(index)} slugs",
        extra={
            "city_count": len(cities),
            "collision_count": len(index.collisions),
        },
    )
    return catalog
