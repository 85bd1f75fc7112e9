"""Candidate Slug Index — every candidate slug → owning CityRecord.

Invariants:
    - First-writer-wins across cities AND candidates: a key is inserted only
      if absent. Iteration follows city order, then candidate order.
    - Each refused insertion by a different city is recorded as a SlugCollision
    - find_by_slug() slugifies the query first; absent key → None (not an error)
    - Index is read-only after build (MappingProxyType)

Design Decisions:
    - Precedence is never "fixed": changing it would change which city wins at
      known collision sites. Collisions are surfaced through logs instead.
    - Canonical-slug shadowing (a later city's own slug claimed earlier as a
      secondary candidate) logged at WARNING; other collisions at DEBUG
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from collections.abc import Iterable, Mapping

from timeincity.core.city_record import CityRecord
from timeincity.core.domain_types import CitySlug
from timeincity.core.slugify import candidate_slugs, slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlugCollision:
    """A candidate slug that an earlier city already owned."""
    slug: CitySlug
    owner_slug: CitySlug
    rejected_slug: CitySlug
    shadows_canonical: bool


@dataclass(frozen=True)
class CityIndex:
    """Read-only slug lookup table plus the collisions met while building it."""
    entries: Mapping[str, CityRecord]
    collisions: tuple[SlugCollision, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


def build_index(cities: Iterable[CityRecord]) -> CityIndex:
    """Insert every candidate slug of every city, first writer wins."""
    entries: dict[str, CityRecord] = {}
    collisions: list[SlugCollision] = []

    for city in cities:
        for slug in candidate_slugs(city):
            owner = entries.get(slug)
            if owner is None:
                entries[slug] = city
                continue
            if owner is city:
                continue
            collision = SlugCollision(
                slug=slug,
                owner_slug=owner.slug,
                rejected_slug=city.slug,
                shadows_canonical=(slug == city.slug),
            )
            collisions.append(collision)
            _log_collision(collision)

    return CityIndex(
        entries=MappingProxyType(entries), collisions=tuple(collisions),
    )


def _log_collision(collision: SlugCollision) -> None:
    if collision.shadows_canonical:
        logger.warning(
            f"Canonical slug '{collision.slug}' of '{collision.rejected_slug}' "
            f"already claimed by '{collision.owner_slug}'",
            extra={"slug": collision.slug},
        )
    else:
        logger.debug(
            f"Candidate slug '{collision.slug}' kept for '{collision.owner_slug}', "
            f"skipped for '{collision.rejected_slug}'",
            extra={"slug": collision.slug},
        )


def find_by_slug(index: CityIndex, query: str) -> CityRecord | None:
    """Resolve a raw, mixed-case or punctuated reference to a city."""
    if not query:
        return None
    return index.entries.get(slugify(query))
