"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CitySlug is always in slugify() form (lowercase, [a-z0-9-], no edge hyphens)
    - RegionTag is a closed set of 7 buckets — no raw string matching
    - ALL_CITIES_PAGE is a directory page, never a RegionTag

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: FastAPI responses)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CitySlug = NewType("CitySlug", str)


# ─── Enums ───────────────────────────────────────────────────────

class RegionTag(str, Enum):
    """Continental/country bucket used for directory browsing."""
    UNITED_STATES = "united-states"
    NORTH_AMERICA = "north-america"
    SOUTH_AMERICA = "south-america"
    EUROPE = "europe"
    AFRICA = "africa"
    ASIA = "asia"
    OCEANIA = "oceania"


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_REGION = RegionTag.ASIA
DEFAULT_SEARCH_LIMIT = 10
ALL_CITIES_PAGE = "all-cities"
