"""Core functionalities: stateless helpers over plain objects and functions.

Architecture Note:
    core/ contains pure helpers with no state of their own. The only
    process-wide values are the default bind receiver (core/function/context.py)
    and the cached settings (config/).
"""

from objlang.core.compose import Delegate, deep_delegate, deep_mixin, delegate, mixin
from objlang.core.function import (
    BoundFunction,
    GlobalContext,
    PartialFunction,
    bind,
    get_global_context,
    partial,
    set_global_context,
)
from objlang.core.path import PropertyPath, get_property, has_property, set_property
from objlang.core.types import MISSING, Missing, is_record

__all__ = [
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
]
