"""Settings for the negotiation middleware and dependency."""

from functools import lru_cache
from typing import List, Sequence

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_conneg.core.errors import ConfigurationError
from fastapi_conneg.core.negotiator import parse_available_types


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONNEG_", case_sensitive=True)

    ENVIRONMENT: str = Field(
        default="development",
        description="'development' logs to the console, anything else logs JSON",
    )
    LOG_LEVEL: str = "INFO"
    AVAILABLE_MEDIA_TYPES: List[str] = Field(
        default=["application/json"],
        description="Content types the server can produce, most preferred first",
    )
    VARY_ACCEPT: bool = True
    STATE_KEY: str = "content_type"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def resolve_available_types(available: Sequence[str] | None) -> list[str]:
    """Return ``available`` or the configured default, rejecting an empty list."""
    if available is None:
        available = get_settings().AVAILABLE_MEDIA_TYPES
    available = list(available)
    if not available:
        raise ConfigurationError("At least one available content type is required.")
    if len(parse_available_types(available)) != len(available):
        logger.warning("Some available content types are malformed and will be skipped: {}", available)
    return available
