import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Look for .env in project root (parent of server/)
_env_file = Path(__file__).resolve().parent.parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    # Environment
    env: Literal["development", "production"] = "development"

    # Server
    port: int = 8000

    # Deezer endpoints
    deezer_base_url: str = "https://www.deezer.com"
    deezer_api_base_url: str = "https://api.deezer.com"
    deezer_image_base_url: str = "https://e-cdn-images.dzcdn.net/images"

    # Search: limit sent upstream when the caller gives no usable limit
    search_default_limit: int = 100

    # CORS - comma-separated origins or "*" for all (dev only)
    cors_origins: str = "*"

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def validate_settings(settings: Settings) -> None:
    """Validate settings and print helpful error messages."""
    errors = []

    for name in ("deezer_base_url", "deezer_api_base_url", "deezer_image_base_url"):
        value = getattr(settings, name)
        if not value.startswith(("http://", "https://")):
            errors.append(f"{name.upper()} must be an absolute http(s) URL, got {value!r}")
        elif value.endswith("/"):
            logging.warning("%s has a trailing slash; generated URLs will contain '//'", name.upper())

    if settings.search_default_limit <= 0:
        errors.append("SEARCH_DEFAULT_LIMIT must be a positive integer")

    if settings.is_production and settings.cors_origins == "*":
        logging.warning(
            "CORS_ORIGINS is '*' in production - set it to your frontend domain"
        )

    if errors:
        for error in errors:
            logging.error("Configuration error: %s", error)
        sys.exit(1)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    validate_settings(settings)
    return settings
