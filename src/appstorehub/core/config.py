"""Configuration management for appstorehub."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Safari/605.1.15"
)


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # HTTP
    user_agent: str = Field(DEFAULT_USER_AGENT, description="Browser User-Agent sent with every request")
    request_timeout: Optional[float] = Field(30.0, description="Per-request timeout in seconds")

    # Storefront defaults
    default_country: str = Field("us", description="Two-letter country code used when none is given")
    default_lang: Optional[str] = Field(None, description="Language passed to the lookup endpoint")

    # Memoization
    cache_max_age: float = Field(300.0, description="Seconds a memoized result stays valid")
    cache_max_entries: int = Field(1000, description="Maximum number of memoized results")
    cache_dir: Optional[str] = Field(None, description="Memo directory (temporary directory when unset)")

    class Config:
        env_prefix = "APPSTOREHUB_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
