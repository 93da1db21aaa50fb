"""Core type definitions for objlang."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final, Literal, TypeGuard


class Missing(Enum):
    """Sentinel type for lookups that did not resolve.

    `None` is a legitimate stored value, so path lookups report a miss with
    `MISSING` instead. The member is falsy so `if value:` checks still read
    naturally.
    """

    MISSING = "MISSING"

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = Missing.MISSING


def is_record(value: Any) -> TypeGuard[Mapping[Any, Any]]:
    """Check whether composition helpers should recurse into a value.

    Records are exactly `Mapping` instances (dicts, delegates, mapping
    proxies). Lists, tuples, strings, callables, None and arbitrary objects
    are not records and are always assigned by reference.

    Args:
        value: Value to classify.

    Returns:
        True if value is a mapping.
    """
    return isinstance(value, Mapping)
