"""Composition functionality: delegate model, mixin and delegate operations."""

from objlang.core.compose.models import Delegate
from objlang.core.compose.operations import deep_delegate, deep_mixin, delegate, mixin

__all__ = [
    # Models
    "Delegate",
    # Operations
    "mixin",
    "deep_mixin",
    "delegate",
    "deep_delegate",
]
