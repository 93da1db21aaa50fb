"""Process-wide default receiver for functions bound without a context."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any


class GlobalContext(SimpleNamespace):
    """Attribute bag used as receiver when bind() is given a None context."""

    def __repr__(self) -> str:
        return f"GlobalContext({vars(self)!r})"


# Module-level default context instance
_global_context: Any = GlobalContext()


def get_global_context() -> Any:
    """Access the default receiver.

    Returns:
        The object functions bound to None receive as their first argument.
    """
    return _global_context


def set_global_context(context: Any) -> Any:
    """Replace the default receiver.

    Bound functions resolve the default at call time, so the replacement
    also applies to functions bound earlier.

    Args:
        context: New default receiver. None restores a fresh GlobalContext.

    Returns:
        The previous default receiver, for restoring later.
    """
    global _global_context
    previous = _global_context
    _global_context = GlobalContext() if context is None else context
    return previous
