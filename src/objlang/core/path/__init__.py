"""Property path functionality: model and get/set operations."""

from objlang.core.path.models import PropertyPath
from objlang.core.path.operations import get_property, has_property, set_property

__all__ = [
    # Models
    "PropertyPath",
    # Operations
    "get_property",
    "has_property",
    "set_property",
]
