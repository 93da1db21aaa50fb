"""Configuration module using Pydantic Settings.

Provides typed configuration for path operations with environment variable support.

Usage:
    from objlang.config import LangSettings

    settings = LangSettings(path_separator="/")
"""

from objlang.config.settings import LangSettings, get_settings

__all__ = [
    "LangSettings",
    "get_settings",
]
