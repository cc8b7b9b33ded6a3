"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from i18ncheck.models.config import (
    DEFAULT_ATTR_NAME,
    DEFAULT_ATTR_PATTERN,
    DEFAULT_DISABLE_COMMENT,
    DEFAULT_IGNORE_TAGS,
)


class Settings(BaseSettings):
    """Configuration defaults for an i18ncheck run.

    Values are read from ``I18NCHECK_*`` environment variables and from a
    ``.env`` file in the working directory.  List values are given as JSON,
    e.g. ``I18NCHECK_IGNORE_TAGS='["code", "pre"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="I18NCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Marker rules
    attr_name: str = DEFAULT_ATTR_NAME
    attr_pattern: str = DEFAULT_ATTR_PATTERN
    ignore_tags: list[str] = sorted(DEFAULT_IGNORE_TAGS)
    disable_comment: str = DEFAULT_DISABLE_COMMENT

    # File discovery
    include: list[str] = ["**/*.html"]
    exclude: list[str] = []
    workers: int = 4
    config_file: str | None = None
