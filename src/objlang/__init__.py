"""objlang: object and function helpers for plain Python data.

Usage:
    from objlang import deep_mixin, delegate, get_property, set_property

    config = {"server": {"port": 80}}
    set_property(config, "server.tls.enabled", True)
    get_property(config, "server.tls.enabled")      # True
    get_property(config, "client.port")             # MISSING

    defaults = {"retries": 3, "http": {"timeout": 10}}
    overrides = delegate(defaults, {"retries": 5})
    overrides["retries"], overrides["http"]         # 5, {"timeout": 10}
    list(overrides)                                 # ["retries"]

    merged = deep_mixin({}, defaults, {"http": {"proxy": None}})
    merged["http"]                                  # {"timeout": 10, "proxy": None}
"""

__version__ = "0.1.0"

# Config
from objlang.config import LangSettings, get_settings

# Core helpers
from objlang.core import (
    MISSING,
    BoundFunction,
    Delegate,
    GlobalContext,
    Missing,
    PartialFunction,
    PropertyPath,
    bind,
    deep_delegate,
    deep_mixin,
    delegate,
    get_global_context,
    get_property,
    has_property,
    is_record,
    mixin,
    partial,
    set_global_context,
    set_property,
)

# Errors
from objlang.errors import ObjLangError, PropertyPathError

__all__ = [
    # Version
    "__version__",
    # Types
    "MISSING",
    "Missing",
    "is_record",
    # Path
    "PropertyPath",
    "get_property",
    "has_property",
    "set_property",
    # Compose
    "Delegate",
    "mixin",
    "deep_mixin",
    "delegate",
    "deep_delegate",
    # Function
    "BoundFunction",
    "PartialFunction",
    "GlobalContext",
    "bind",
    "partial",
    "get_global_context",
    "set_global_context",
    # Config
    "LangSettings",
    "get_settings",
    # Errors
    "ObjLangError",
    "PropertyPathError",
]
