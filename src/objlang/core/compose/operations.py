"""Pure functions for composing mappings.

Stateless functions copying properties between mappings (mixin) and
layering mappings over one another (delegate).

Only own keys are copied from top-level sources: for a Delegate source that
means its overrides, not what it inherits. Nested Delegate values merged by
deep_mixin are resolved in full, so keys they inherit are kept.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from objlang.core.compose.models import Delegate
from objlang.core.types import is_record


def _resolved(record: Mapping[Any, Any]) -> Mapping[Any, Any]:
    """Nested delegate records contribute inherited keys as well as own ones."""
    if isinstance(record, Delegate):
        return record.flatten()
    return record


def mixin(
    target: MutableMapping[Any, Any] | None,
    *sources: Mapping[Any, Any] | None,
) -> MutableMapping[Any, Any]:
    """Copy top-level keys from sources onto target.

    Sources are applied in order, so later sources overwrite earlier ones
    and the target. Nested values are shared by reference.

    Args:
        target: Mapping to mutate. None creates a new dict.
        *sources: Mappings to copy from. None entries are skipped.

    Returns:
        The target.
    """
    if target is None:
        target = {}

    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            target[key] = value

    return target


def deep_mixin(
    target: MutableMapping[Any, Any] | None,
    *sources: Mapping[Any, Any] | None,
) -> MutableMapping[Any, Any]:
    """Copy keys from sources onto target, merging nested mappings.

    Same order and overwrite policy as mixin. A mapping value from a source
    is never shared: the target gets a new dict holding the existing target
    value (when that is a mapping too) deep-mixed with the incoming one.
    Nested delegates contribute their inherited keys as well.
    Lists, scalars, callables and other objects are assigned by reference.

    Args:
        target: Mapping to mutate. None creates a new dict.
        *sources: Mappings to copy from. None entries are skipped.

    Returns:
        The target.
    """
    if target is None:
        target = {}

    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            if is_record(value):
                existing = target.get(key)
                merged: dict[Any, Any] = {}
                if is_record(existing):
                    deep_mixin(merged, _resolved(existing))
                value = deep_mixin(merged, _resolved(value))
            target[key] = value

    return target


def delegate(source: Mapping[Any, Any], properties: Mapping[Any, Any] | None = None) -> Delegate:
    """Create a mapping that falls back to source for keys it does not own.

    Args:
        source: Fallback mapping.
        properties: Own overrides, shallow-copied onto the new delegate.

    Returns:
        New Delegate over source.
    """
    result = Delegate(source)
    if properties is not None:
        mixin(result, properties)
    return result


def deep_delegate(
    source: Mapping[Any, Any], properties: Mapping[Any, Any] | None = None
) -> Delegate:
    """Create a delegate whose nested mappings also fall back to source.

    A mapping value in properties becomes a nested delegate over the
    source's value at the same key, so unset nested keys still resolve
    against the source. When the source holds no mapping at that key the
    nested delegate falls back to an empty mapping.

    Args:
        source: Fallback mapping.
        properties: Own overrides, possibly nested.

    Returns:
        New Delegate over source.
    """
    result = Delegate(source)
    if properties is None:
        return result

    for key, value in properties.items():
        if is_record(value):
            nested = source.get(key)
            value = deep_delegate(nested if is_record(nested) else {}, value)
        result[key] = value

    return result
