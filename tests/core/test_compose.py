"""Tests for mixin and deep_mixin."""

from types import MappingProxyType

from hypothesis import given
from hypothesis import strategies as st

from objlang import (
    Delegate,
    deep_delegate,
    deep_mixin,
    delegate,
    get_property,
    is_record,
    mixin,
)

flat_records = st.dictionaries(st.text(max_size=3), st.integers(), max_size=5)


@given(sources=st.lists(flat_records, max_size=4))
def test_mixin_later_sources_win(sources):
    """CRITICAL: Each key ends up with the value of the last source defining it."""
    expected: dict = {}
    for source in sources:
        expected.update(source)

    assert mixin({}, *sources) == expected


def test_mixin_without_target_creates_dict():
    result = mixin(None)

    assert result == {}
    assert isinstance(result, dict)
    assert mixin(None) is not result


def test_mixin_returns_target(properties):
    target: dict = {}

    assert mixin(target, properties) is target


def test_mixin_copies_keys_shallowly(properties):
    dest = mixin({}, properties)

    assert dest == properties
    assert dest["sub_object"] is properties["sub_object"]
    assert dest["method"] is properties["method"]


def test_mixin_overwrites_target_and_earlier_sources(properties):
    extra = mixin({"property": "original"}, properties, {"property": "blah", "new": "foo"})

    assert extra["property"] == "blah"
    assert extra["new"] == "foo"


def test_mixin_skips_none_sources():
    assert mixin({"a": 1}, None, {"b": 2}, None) == {"a": 1, "b": 2}


def test_mixin_copies_only_own_keys_of_delegate():
    source = delegate({"inherited": 1}, {"own": 2})

    assert mixin({}, source) == {"own": 2}


def test_mixin_onto_delegate_sets_overrides():
    base = {"a": 1}
    target = delegate(base)
    mixin(target, {"a": 2})

    assert target.has_own("a")
    assert base == {"a": 1}


def test_deep_mixin_copies_nested_records(properties):
    """CRITICAL: Nested records are equal but never shared with the source."""
    dest = deep_mixin({}, properties)

    assert dest == properties
    assert dest["sub_object"] is not properties["sub_object"]

    dest["sub_object"]["property"] = "changed"
    assert properties["sub_object"]["property"] == "baz"


def test_deep_mixin_merges_into_existing_records(properties):
    dest = deep_mixin({}, properties)
    extra = deep_mixin(
        dest,
        {"property": "blah", "new": "foo", "sub_object": {"other": "la"}},
    )

    assert extra is dest
    assert extra["property"] == "blah"
    assert extra["new"] == "foo"
    assert extra["sub_object"] is not properties["sub_object"]
    assert extra["sub_object"] == {"property": "baz", "other": "la"}


def test_deep_mixin_does_not_mutate_shared_target_records():
    shared = {"x": 1}
    target = {"sub": shared}
    deep_mixin(target, {"sub": {"y": 2}})

    assert target["sub"] == {"x": 1, "y": 2}
    assert shared == {"x": 1}


def test_deep_mixin_keeps_inherited_keys_of_nested_delegate():
    """Merging into a nested delegate must not drop what it reads from its source."""
    dest = deep_delegate({"sub": {"k": 1}}, {"sub": {"x": 1}})
    deep_mixin(dest, {"sub": {"y": 2}})

    assert dest["sub"] == {"k": 1, "x": 1, "y": 2}
    assert get_property(dest, "sub.k") == 1


def test_deep_mixin_resolves_nested_delegate_sources():
    source = {"sub": delegate({"k": 1}, {"x": 1})}
    dest = deep_mixin({}, source)

    assert dest["sub"] == {"k": 1, "x": 1}
    assert isinstance(dest["sub"], dict)


def test_deep_mixin_recurses_several_levels():
    target = {"a": {"b": {"c": 1, "d": 1}}}
    deep_mixin(target, {"a": {"b": {"d": 2}}})

    assert target == {"a": {"b": {"c": 1, "d": 2}}}


def test_deep_mixin_assigns_lists_by_reference():
    items = [1, 2]
    target = {"items": [0]}
    deep_mixin(target, {"items": items})

    assert target["items"] is items


def test_deep_mixin_assigns_functions_by_reference(properties):
    dest = deep_mixin({}, properties)

    assert dest["method"] is properties["method"]


def test_deep_mixin_record_replaces_scalar():
    target = {"sub": "scalar"}
    deep_mixin(target, {"sub": {"x": 1}})

    assert target["sub"] == {"x": 1}


def test_deep_mixin_scalar_replaces_record():
    target = {"sub": {"x": 1}}
    deep_mixin(target, {"sub": None})

    assert target["sub"] is None


def test_deep_mixin_copies_read_only_records():
    source = {"sub": MappingProxyType({"x": 1})}
    dest = deep_mixin(None, source)

    assert dest["sub"] == {"x": 1}
    assert isinstance(dest["sub"], dict)


def test_is_record_classification():
    assert is_record({})
    assert is_record(MappingProxyType({}))
    assert is_record(Delegate({}))
    assert not is_record([])
    assert not is_record(())
    assert not is_record("text")
    assert not is_record(None)
    assert not is_record(len)
    assert not is_record(lambda: None)
