"""Slug Generation — URL-safe identifiers and per-city candidate slugs.

Invariants:
    - slugify() output matches ^[a-z0-9]+(-[a-z0-9]+)*$ or is empty
    - slugify() is idempotent: slugify(slugify(x)) == slugify(x)
    - candidate_slugs() never contains duplicates or empty strings
    - Candidate order: canonical, name-only, name+state+country

Design Decisions:
    - ASCII-only: accented letters collapse into separators ("São" -> "s-o").
      Datasets carry an explicit slug for such names.
"""

import re

from timeincity.core.domain_types import CitySlug

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def slugify(label: str) -> CitySlug:
    """Lowercase, collapse every run outside [a-z0-9] to '-', trim hyphens."""
    return CitySlug(_NON_SLUG_RUN.sub("-", label.lower()).strip("-"))


def build_city_slug(
    name: str, state_or_region: str | None, country: str | None,
) -> CitySlug:
    """Slug from the non-empty parts of name, state and country."""
    parts = [part for part in (name, state_or_region, country) if part]
    return slugify("-".join(parts))


def candidate_slugs(city) -> list[CitySlug]:
    """All slugs that identify a city, de-duplicated in insertion order.

    Accepts any object with name, slug, state_or_region and country
    attributes (CityRecord in practice).
    """
    primary = (
        slugify(city.slug) if city.slug
        else build_city_slug(city.name, city.state_or_region, city.country)
    )
    candidates = [
        primary,
        slugify(city.name),
        build_city_slug(city.name, city.state_or_region, city.country),
    ]
    # dict preserves insertion order
    return [slug for slug in dict.fromkeys(candidates) if slug]
