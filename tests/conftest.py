"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objlang import GlobalContext, get_settings, set_global_context


def _method(self):
    return self


@pytest.fixture
def properties():
    """Fresh nested record with a scalar, a nested record and a function."""
    return {
        "property": "bar",
        "sub_object": {"property": "baz"},
        "method": _method,
    }


@pytest.fixture
def global_context():
    """Isolated default receiver, restored after the test."""
    context = GlobalContext()
    previous = set_global_context(context)
    yield context
    set_global_context(previous)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read OBJLANG_* settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
