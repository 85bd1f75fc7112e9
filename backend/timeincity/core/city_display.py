"""City Display Labels — "Name, State, Country" strings for search results and pages.

Invariants:
    - No comma-separated segment appears twice (case-insensitive comparison)
    - Empty/whitespace-only segments are dropped; kept segments are trimmed
    - Any recognized United States variant renders as "USA"
    - collation_key() gives a locale-aware ordering (accent- and case-insensitive)

Design Decisions:
    - Accent stripping via unicodedata NFD: "Zürich" sorts next to "Zurich"
      without a system-locale dependency (ADR: deterministic across hosts)
"""

import unicodedata

US_SHORT_LABEL = "USA"

_US_COUNTRY_VARIANTS = frozenset({
    "us", "u.s.", "usa", "u.s.a.", "united states", "united states of america",
})


def normalize_country_label(country: str | None, country_code: str | None = None) -> str:
    """Rewrite United States variants to USA; other countries pass through trimmed."""
    label = (country or "").strip()
    code = (country_code or "").strip().upper()
    if code == "US" or label.lower() in _US_COUNTRY_VARIANTS:
        return US_SHORT_LABEL
    return label


def format_city_display(
    name: str,
    state_or_region: str | None = None,
    country: str | None = None,
    country_code: str | None = None,
) -> str:
    """Join name, state and country, skipping empties and repeated segments."""
    parts = [name, state_or_region, normalize_country_label(country, country_code)]

    seen: set[str] = set()
    segments: list[str] = []
    for part in parts:
        if not part or not part.strip():
            continue
        text = part.strip()
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        segments.append(text)

    return ", ".join(segments)


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def collation_key(text: str) -> tuple[str, str]:
    """Sort key: accent-stripped casefold first, raw text as tie-breaker."""
    return strip_accents(text).casefold(), text
