"""Function functionality: bound/partial models, binding and global context."""

from objlang.core.function.context import (
    GlobalContext,
    get_global_context,
    set_global_context,
)
from objlang.core.function.core import bind, partial
from objlang.core.function.models import BoundFunction, PartialFunction

__all__ = [
    # Models
    "BoundFunction",
    "PartialFunction",
    "GlobalContext",
    # Core
    "bind",
    "partial",
    "get_global_context",
    "set_global_context",
]
