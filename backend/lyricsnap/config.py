from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class GeniusSettings(BaseSettings):
    search_url: str = Field(default="https://genius.com/api/search/multi", alias="GENIUS_SEARCH_URL")
    per_page: int = Field(default=5, alias="GENIUS_PER_PAGE")
    timeout: float = Field(default=15.0, alias="GENIUS_TIMEOUT")
    user_agent: str = Field(default=BROWSER_USER_AGENT, alias="GENIUS_USER_AGENT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


class ExtractorSettings(BaseSettings):
    """
    Selectors and noise patterns used to pull lyrics out of a Genius page.

    Genius changes its markup every so often; everything that depends on it
    lives here so it can be updated through the environment.
    """

    container_selector: str = 'div[data-lyrics-container="true"]'
    fallback_selectors: list[str] = Field(
        default_factory=lambda: [".lyrics", ".SongPage__LyricsText-sc-19xhmoi-0"]
    )
    excluded_selector: str = '[data-exclude-from-selection="true"]'
    contributor_pattern: str = r"^\d+\s*ContributorsTranslations.*$"
    annotation_pattern: str = r"^\[.*\]$"
    header_overlap_chars: int = 10
    ignore_blank_header_match: bool = False

    model_config = SettingsConfigDict(env_prefix="LYRICSNAP_EXTRACTOR_", env_file=".env", extra="ignore")


class AppSettings(BaseSettings):
    version: str = "0.1.0"
    log_level: str = Field(default="INFO", alias="LYRICSNAP_LOG_LEVEL")
    max_selected_lines: int = Field(default=4, alias="LYRICSNAP_MAX_SELECTED_LINES")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    provider: GeniusSettings = Field(default_factory=GeniusSettings)
    extractor: ExtractorSettings = Field(default_factory=ExtractorSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache(1)
def get_settings() -> AppSettings:
    return AppSettings()
