"""
Tests for nested payload construction from flat form fields.
"""
import pytest
from starlette.datastructures import FormData

from devroster.forms.paths import deep_set, form_data_object, is_index_segment, split_path


# ============================================
# split_path
# ============================================

@pytest.mark.parametrize("path, expected", [
    ("name", ["name"]),
    ("skills.communicative", ["skills", "communicative"]),
    ("items[0][name]", ["items", "0", "name"]),
    ("a[0].name", ["a", "0", "name"]),
    ("a..b", ["a", "b"]),
    ("", []),
    ("..[]", []),
])
def test_split_path(path, expected):
    assert split_path(path) == expected


# ============================================
# is_index_segment
# ============================================

@pytest.mark.parametrize("segment", ["0", "7", "42", "007", 0, 3])
def test_index_segments_accepted(segment):
    assert is_index_segment(segment)


@pytest.mark.parametrize("segment", ["-1", "1.5", "abc", "1e3", "", " 1", -1, 1.0, True, None])
def test_non_index_segments_rejected(segment):
    assert not is_index_segment(segment)


# ============================================
# deep_set
# ============================================

def test_single_segment_is_plain_assignment():
    target = {"existing": 1}
    deep_set(target, "name", "Ada")
    assert target == {"existing": 1, "name": "Ada"}


def test_nested_mapping_created_for_dot_path():
    result = deep_set({}, "a.b.c", "x")
    assert result == {"a": {"b": {"c": "x"}}}


def test_list_created_when_next_segment_is_index():
    result = deep_set({}, "a[0].name", "Ada")
    assert isinstance(result["a"], list)
    assert result == {"a": [{"name": "Ada"}]}


def test_mapping_created_when_next_segment_is_not_index():
    result = deep_set({}, "a.name", "Ada")
    assert isinstance(result["a"], dict)


def test_list_grows_by_appending():
    target = {}
    deep_set(target, "items[0]", "first")
    deep_set(target, "items[1]", "second")
    deep_set(target, "items[0]", "replaced")
    assert target == {"items": ["replaced", "second"]}


def test_index_past_end_of_list_is_noop():
    target = {"items": ["first"]}
    deep_set(target, "items[5]", "x")
    deep_set(target, "items[99999999999][name]", "x")
    assert target == {"items": ["first"]}


def test_huge_index_does_not_allocate():
    result = form_data_object([("items[20000000]", "x")])
    assert len(result["items"]) == 0


def test_pre_split_path():
    result = deep_set({}, ["items", 0, "name"], "b")
    assert result == {"items": [{"name": "b"}]}


def test_mutates_and_returns_same_object():
    target = {}
    assert deep_set(target, "a.b", 1) is target
    assert target == {"a": {"b": 1}}


def test_reapplying_same_value_is_idempotent():
    once = deep_set({}, "items[0][name]", "Ada")
    twice = deep_set(deep_set({}, "items[0][name]", "Ada"), "items[0][name]", "Ada")
    assert once == twice


def test_overwrite_keeps_siblings():
    target = {}
    deep_set(target, "skills.timely", "50")
    deep_set(target, "skills.tinker", "60")
    deep_set(target, "skills.timely", "90")
    assert target == {"skills": {"timely": "90", "tinker": "60"}}


def test_incremental_build_of_list_items():
    target = {}
    deep_set(target, "items[0][name]", "a")
    deep_set(target, "items[1][name]", "b")
    deep_set(target, "items[0][qty]", "2")
    assert target == {"items": [{"name": "a", "qty": "2"}, {"name": "b"}]}


def test_scalar_in_the_way_is_replaced_by_container():
    target = {"skills": "none"}
    deep_set(target, "skills.timely", "80")
    assert target == {"skills": {"timely": "80"}}


@pytest.mark.parametrize("primitive", [None, 5, "text", 1.5, True])
def test_non_container_target_is_returned_unchanged(primitive):
    assert deep_set(primitive, "a.b", 1) == primitive


def test_malformed_path_is_noop():
    target = {"a": 1}
    deep_set(target, "..[]", "x")
    deep_set(target, [], "x")
    assert target == {"a": 1}


def test_non_index_segment_under_list_is_noop():
    target = {"items": ["first"]}
    deep_set(target, "items.name", "x")
    deep_set(target, "items.name.deeper", "x")
    assert target == {"items": ["first"]}


def test_list_target():
    assert deep_set([], "0.name", "b") == [{"name": "b"}]
    assert deep_set([], "1.name", "b") == []


# ============================================
# form_data_object
# ============================================

def test_form_entries_fold_into_nested_object():
    entries = [
        ("name", "Ada"),
        ("skills.communicative", "80"),
        ("skills.efficient", "60"),
    ]
    assert form_data_object(entries) == {
        "name": "Ada",
        "skills": {"communicative": "80", "efficient": "60"},
    }


def test_form_data_keeps_submission_order_for_repeated_names():
    form = FormData([("tag", "first"), ("tag", "second")])
    assert form_data_object(form) == {"tag": "second"}


def test_form_data_from_mapping():
    assert form_data_object({"a[0]": "x", "b.c": "y"}) == {"a": ["x"], "b": {"c": "y"}}


def test_empty_form():
    assert form_data_object([]) == {}
