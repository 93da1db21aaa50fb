"""Exception types raised by objlang."""

from __future__ import annotations


class ObjLangError(Exception):
    """Base class for objlang errors."""

    pass


class PropertyPathError(ObjLangError, LookupError):
    """Raised in strict mode when a property path does not resolve."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(f"Property path {path!r} does not resolve at segment {segment!r}")
        self.path = path
        self.segment = segment
