"""Region Classifier — country code / timezone to RegionTag mapping.

Invariants:
    - Pure function: no IO, no async
    - Total: always returns a RegionTag, never raises (any input, including None)
    - Resolution order: US code → country sets (NA, SA, AF, EU, AS, OC)
      → timezone prefix → DEFAULT_REGION
    - Country code comparison is case-insensitive

Design Decisions:
    - frozenset tables over a single dict: order of checks is explicit and
      mirrors the directory pages (ADR: table-driven, testable)
    - "America/*" timezones map to north-america even for South American zones:
      the prefix carries no hemisphere information. Country codes win first.
    - DEFAULT_REGION (asia) kept for parity with the live site. Do not
      extend without product input.
"""

from timeincity.core.domain_types import RegionTag, DEFAULT_REGION

US_COUNTRY_CODE = "US"

NORTH_AMERICA_CODES = frozenset({
    "CA", "MX", "GL", "BM", "PM",
    # Central America
    "BZ", "CR", "GT", "HN", "NI", "PA", "SV",
    # Caribbean
    "AG", "AI", "AW", "BB", "BL", "BQ", "BS", "CU", "CW", "DM", "DO", "GD",
    "GP", "HT", "JM", "KN", "KY", "LC", "MF", "MQ", "MS", "PR", "SX", "TC",
    "TT", "VC", "VG", "VI",
})

SOUTH_AMERICA_CODES = frozenset({
    "AR", "BO", "BR", "CL", "CO", "EC", "FK", "GF", "GY", "PE", "PY", "SR",
    "UY", "VE",
})

AFRICA_CODES = frozenset({
    "AO", "BF", "BI", "BJ", "BW", "CD", "CF", "CG", "CI", "CM", "CV", "DJ",
    "DZ", "EG", "EH", "ER", "ET", "GA", "GH", "GM", "GN", "GQ", "GW", "KE",
    "KM", "LR", "LS", "LY", "MA", "MG", "ML", "MR", "MU", "MW", "MZ", "NA",
    "NE", "NG", "RE", "RW", "SC", "SD", "SH", "SL", "SN", "SO", "SS", "ST",
    "SZ", "TD", "TG", "TN", "TZ", "UG", "YT", "ZA", "ZM", "ZW",
})

EUROPE_CODES = frozenset({
    "AD", "AL", "AT", "AX", "BA", "BE", "BG", "BY", "CH", "CY", "CZ", "DE",
    "DK", "EE", "ES", "FI", "FO", "FR", "GB", "GG", "GI", "GR", "HR", "HU",
    "IE", "IM", "IS", "IT", "JE", "LI", "LT", "LU", "LV", "MC", "MD", "ME",
    "MK", "MT", "NL", "NO", "PL", "PT", "RO", "RS", "RU", "SE", "SI", "SJ",
    "SK", "SM", "TR", "UA", "VA", "XK",
})

ASIA_CODES = frozenset({
    "AE", "AF", "AM", "AZ", "BD", "BH", "BN", "BT", "CN", "GE", "HK", "ID",
    "IL", "IN", "IO", "IQ", "IR", "JO", "JP", "KG", "KH", "KP", "KR", "KW",
    "KZ", "LA", "LB", "LK", "MM", "MN", "MO", "MV", "MY", "NP", "OM", "PH",
    "PK", "PS", "QA", "SA", "SG", "SY", "TH", "TJ", "TL", "TM", "TW", "UZ",
    "VN", "YE",
})

OCEANIA_CODES = frozenset({
    "AS", "AU", "CK", "FJ", "FM", "GU", "KI", "MH", "MP", "NC", "NF", "NR",
    "NU", "NZ", "PF", "PG", "PN", "PW", "SB", "TK", "TO", "TV", "UM", "VU",
    "WF", "WS",
})

# Checked in this order after the US code
_COUNTRY_TABLES: tuple[tuple[frozenset[str], RegionTag], ...] = (
    (NORTH_AMERICA_CODES, RegionTag.NORTH_AMERICA),
    (SOUTH_AMERICA_CODES, RegionTag.SOUTH_AMERICA),
    (AFRICA_CODES, RegionTag.AFRICA),
    (EUROPE_CODES, RegionTag.EUROPE),
    (ASIA_CODES, RegionTag.ASIA),
    (OCEANIA_CODES, RegionTag.OCEANIA),
)

TIMEZONE_PREFIX_REGIONS: dict[str, RegionTag] = {
    "America": RegionTag.NORTH_AMERICA,
    "Europe": RegionTag.EUROPE,
    "Africa": RegionTag.AFRICA,
    "Asia": RegionTag.ASIA,
    "Australia": RegionTag.OCEANIA,
    "Pacific": RegionTag.OCEANIA,
    "Indian": RegionTag.ASIA,
    "Antarctica": RegionTag.OCEANIA,
}


def _region_from_country(country_code: str | None) -> RegionTag | None:
    if not isinstance(country_code, str):
        return None
    code = country_code.strip().upper()
    if not code:
        return None
    if code == US_COUNTRY_CODE:
        return RegionTag.UNITED_STATES
    for codes, region in _COUNTRY_TABLES:
        if code in codes:
            return region
    return None


def _region_from_timezone(timezone: str | None) -> RegionTag | None:
    if not isinstance(timezone, str) or "/" not in timezone:
        return None
    prefix = timezone.strip().split("/", 1)[0]
    return TIMEZONE_PREFIX_REGIONS.get(prefix)


def classify_region(
    country_code: str | None = None, timezone: str | None = None,
) -> RegionTag:
    """Assign a city to one of the 7 region buckets."""
    return (
        _region_from_country(country_code)
        or _region_from_timezone(timezone)
        or DEFAULT_REGION
    )
