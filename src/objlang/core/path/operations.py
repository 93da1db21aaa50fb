"""Pure functions for reading and writing nested properties by path.

Mappings are walked by key, any other object by attribute, so the same path
works across dicts, delegates, dataclasses and namespaces.

Usage:
    data = {"server": {"port": 80}}

    get_property(data, "server.port")      # 80
    get_property(data, "server.host")      # MISSING
    set_property(data, "server.tls.on", True)
    data["server"]["tls"]                  # {"on": True}
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import Any

from objlang.config import LangSettings, get_settings
from objlang.core.path.models import PropertyPath
from objlang.core.types import MISSING
from objlang.errors import PropertyPathError


def _parse(path: str, separator: str | None, settings: LangSettings) -> PropertyPath:
    """Parse a path, warning about empty segments.

    Called directly by the public operations, so stacklevel=3 points the
    warning at their caller.
    """
    prop_path = PropertyPath.parse(path, separator or settings.path_separator)
    if prop_path.has_empty_segment:
        warnings.warn(
            f"Property path {path!r} contains an empty segment. "
            f"The empty string will be used as a key.",
            stacklevel=3,
        )
    return prop_path


def _read(container: Any, segment: str) -> Any:
    """Read one segment from a mapping or object, MISSING if absent."""
    if isinstance(container, Mapping):
        # Membership first: subscripting a defaultdict would insert the key
        if segment not in container:
            return MISSING
        return container[segment]
    return getattr(container, segment, MISSING)


def _write(container: Any, segment: str, value: Any) -> None:
    """Write one segment onto a mapping or object."""
    if isinstance(container, Mapping):
        container[segment] = value  # type: ignore[index]
    else:
        setattr(container, segment, value)


def _resolve(obj: Any, prop_path: PropertyPath) -> tuple[Any, str | None]:
    """Walk a parsed path.

    Returns:
        Tuple of (value, None) on success, or (MISSING, segment) naming the
        first segment that did not resolve.
    """
    current = obj
    for segment in prop_path.segments:
        current = _read(current, segment)
        if current is MISSING:
            return MISSING, segment
    return current, None


def get_property(
    obj: Any,
    path: str,
    default: Any = MISSING,
    *,
    separator: str | None = None,
    settings: LangSettings | None = None,
) -> Any:
    """Read a possibly nested property by path.

    Args:
        obj: Mapping or object to read from.
        path: Separator-delimited path, e.g. "subObject.property".
        default: Value returned when any segment is missing.
        separator: Overrides settings.path_separator.
        settings: Overrides the process-wide settings.

    Returns:
        The value at the end of the path, or default if any segment is missing.

    Raises:
        PropertyPathError: If the path does not resolve and strict_paths is set.
    """
    settings = settings or get_settings()
    prop_path = _parse(path, separator, settings)
    value, failed = _resolve(obj, prop_path)
    if failed is not None:
        if settings.strict_paths:
            raise PropertyPathError(str(prop_path), failed)
        return default
    return value


def has_property(
    obj: Any,
    path: str,
    *,
    separator: str | None = None,
    settings: LangSettings | None = None,
) -> bool:
    """Check whether a path resolves. Never raises for missing segments.

    Args:
        obj: Mapping or object to inspect.
        path: Separator-delimited path.
        separator: Overrides settings.path_separator.
        settings: Overrides the process-wide settings.

    Returns:
        True if every segment of the path resolves.
    """
    settings = settings or get_settings()
    _, failed = _resolve(obj, _parse(path, separator, settings))
    return failed is None


def set_property(
    obj: Any,
    path: str,
    value: Any,
    *,
    separator: str | None = None,
    settings: LangSettings | None = None,
) -> None:
    """Write a possibly nested property by path, creating missing containers.

    Every missing intermediate segment is materialized as an empty dict, so
    setting "a.b.c" on {} always succeeds.

    Args:
        obj: Mapping or object to write into. Mutated in place.
        path: Separator-delimited path.
        value: Value assigned to the leaf.
        separator: Overrides settings.path_separator.
        settings: Overrides the process-wide settings.

    Raises:
        AttributeError: If an existing intermediate value cannot hold attributes.
        TypeError: If an existing intermediate mapping is read-only.
    """
    settings = settings or get_settings()
    prop_path = _parse(path, separator, settings)

    current = obj
    for segment in prop_path.parent:
        child = _read(current, segment)
        if child is MISSING:
            child = {}
            _write(current, segment, child)
        current = child

    _write(current, prop_path.leaf, value)
