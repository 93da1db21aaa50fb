"""Delegate mapping: own overrides in front of a fallback source."""

from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping, MutableMapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Delegate(MutableMapping[K, V]):
    """Mapping whose failed lookups fall through to a source mapping.

    Reads check the own overrides first, then the source. Writes and deletes
    only ever touch the overrides, so the source is never mutated through a
    delegate. Iteration, len() and keys() report own keys only, while `in`
    and get() also see inherited keys.

    Args:
        source: Fallback mapping. May itself be a Delegate, forming a chain.
        own: Initial own overrides (copied).
    """

    __slots__ = ("_own", "_source")

    def __init__(self, source: Mapping[K, V], own: Mapping[K, V] | None = None) -> None:
        self._source = source
        self._own: dict[K, V] = dict(own) if own else {}

    @property
    def source(self) -> Mapping[K, V]:
        """The fallback mapping consulted for keys without an override."""
        return self._source

    def own_keys(self) -> KeysView[K]:
        """Keys set directly on this delegate, excluding inherited ones."""
        return self._own.keys()

    def has_own(self, key: object) -> bool:
        """Check whether key is overridden on this delegate.

        Args:
            key: Key to check.

        Returns:
            True if key is an own key, False if inherited or absent.
        """
        return key in self._own

    def flatten(self) -> dict[K, V]:
        """Resolve inherited and own keys into a plain dict.

        Returns:
            New dict with the source's keys (flattened through any delegate
            chain) overlaid by own keys. Nested values are shared.
        """
        if isinstance(self._source, Delegate):
            flat = self._source.flatten()
        else:
            flat = dict(self._source)
        flat.update(self._own)
        return flat

    def __getitem__(self, key: K) -> V:
        if key in self._own:
            return self._own[key]
        return self._source[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._own[key] = value

    def __delitem__(self, key: K) -> None:
        # Inherited keys can only be shadowed, never deleted through the delegate
        del self._own[key]

    def __contains__(self, key: object) -> bool:
        return key in self._own or key in self._source

    def __iter__(self) -> Iterator[K]:
        return iter(self._own)

    def __len__(self) -> int:
        return len(self._own)

    def __repr__(self) -> str:
        return f"Delegate({self._own!r}, source={self._source!r})"
