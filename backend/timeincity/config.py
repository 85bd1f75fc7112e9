"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - search_default_limit <= search_max_limit

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: the bundled dataset works out-of-the-box
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_DATASET_PATH = Path(__file__).parent / "data" / "cities.json"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Dataset
    city_dataset_path: Path = BUNDLED_DATASET_PATH

    # Search
    search_default_limit: int = 10
    search_max_limit: int = 50

    # Featured cities, shown on the home page in this order
    featured_city_slugs: list[str] = [
        "chicago", "new-york", "los-angeles", "london",
        "paris", "tokyo", "sydney", "san-francisco",
    ]

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("search_default_limit", "search_max_limit")
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("search limits must be >= 1")
        return v

    @model_validator(mode="after")
    def default_within_max(self) -> "Settings":
        if self.search_default_limit > self.search_max_limit:
            raise ValueError("search_default_limit must not exceed search_max_limit")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
