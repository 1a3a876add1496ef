"""
Listify Client Settings.

Configuration is read from the environment (prefix ``LISTIFY_``) or from a
``.env`` file in the working directory. Only the base origin is needed to talk
to a backend; everything else is optional.

Environment Variables:
    LISTIFY_BASE_URL   Base origin of the backend (default http://localhost:3000)
    LISTIFY_TIMEOUT    Request timeout in seconds (default: transport default)
    LISTIFY_LOG_LEVEL  Level used by configure_logging() (default WARNING)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from listify_client.constants import DEFAULT_BASE_URL


class ListifySettings(BaseSettings):
    """Settings for connecting to a Listify backend."""

    model_config = SettingsConfigDict(
        env_prefix="LISTIFY_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Scheme, host and port prepended to every request path",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds; None keeps the httpx default",
        gt=0,
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level applied by configure_logging()",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        # Paths always start with "/", so a trailing slash would double it
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> ListifySettings:
    """Get the cached settings instance."""
    return ListifySettings()


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging for applications embedding the client.

    The library never calls this itself.
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
