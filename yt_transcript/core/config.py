"""
Application configuration using pydantic-settings.
"""
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Transcript Cache"
    DEFAULT_LANGUAGE: str = "en"

    # Result cache
    CACHE_ENABLED: bool = True
    CACHE_MAX_ENTRIES: int = 10_000
    CACHE_SUCCESS_TTL_SECONDS: int = 7 * 24 * 3600
    CACHE_ERROR_TTL_SECONDS: int = 3600

    # Usage counters
    USAGE_TRACKING_ENABLED: bool = True
    COUNTER_TTL_SECONDS: int = 2 * 24 * 3600

    # Upstream fetch
    TRANSCRIPT_FETCH_TIMEOUT_SECONDS: float = 30.0
    TRANSCRIPT_FETCH_ATTEMPTS: int = 1

    # Optional proxy for youtube-transcript-api
    PROXY_HTTP_URL: Optional[str] = None
    PROXY_HTTPS_URL: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env")

    @model_validator(mode="after")
    def check_cache_ttls(self) -> "Settings":
        if self.CACHE_ERROR_TTL_SECONDS >= self.CACHE_SUCCESS_TTL_SECONDS:
            raise ValueError(
                "CACHE_ERROR_TTL_SECONDS must be strictly less than CACHE_SUCCESS_TTL_SECONDS"
            )
        if self.TRANSCRIPT_FETCH_ATTEMPTS < 1:
            raise ValueError("TRANSCRIPT_FETCH_ATTEMPTS must be at least 1")
        return self


settings = Settings()
