"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for path
operations.

Usage:
    from objlang.config import LangSettings, get_settings

    # Load from environment variables (OBJLANG_*)
    settings = get_settings()

    # Or override with explicit values
    settings = LangSettings(path_separator="/", strict_paths=True)
    get_property(data, "a/b", settings=settings)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LangSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for property path operations.

    Attributes:
        path_separator: String splitting a property path into segments.
        strict_paths: Raise PropertyPathError instead of returning a default
            when a path does not resolve.

    Environment Variables:
        OBJLANG_PATH_SEPARATOR
        OBJLANG_STRICT_PATHS
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJLANG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    path_separator: str = "."
    strict_paths: bool = False

    @field_validator("path_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("path_separator must not be empty")
        return value


@lru_cache(maxsize=1)
def get_settings() -> LangSettings:
    """Access the process-wide settings, read once from the environment.

    Call `get_settings.cache_clear()` to pick up environment changes.

    Returns:
        The cached LangSettings instance.
    """
    return LangSettings()
