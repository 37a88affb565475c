"""Tests for the object validation engine."""

import json

import pytest

from shapeguard.validation import (
    MISSING,
    ErrorMode,
    ReportingContext,
    create_simplified_tree,
    is_number,
    is_string,
    is_type,
    validate_object,
    validate_property,
)


def silent(mode: ErrorMode, identifier: str = "user") -> ReportingContext:
    return ReportingContext(identifier=identifier, error_mode=mode)


@pytest.mark.parametrize("mode", list(ErrorMode))
def test_matching_object_is_valid_in_every_mode(user_schema, mode) -> None:
    result = validate_object({"name": "John", "age": 30}, user_schema, silent(mode))

    assert result.valid
    assert result.errors == ()
    assert result.tree.valid


def test_single_mode_reports_first_failing_key(user_schema) -> None:
    result = validate_object({"name": 123, "age": "30"}, user_schema, silent(ErrorMode.SINGLE))

    assert not result.valid
    assert result.messages == ['Expected user.name (123) to be "string"']


def test_single_mode_follows_schema_order(user_schema) -> None:
    result = validate_object({"name": "John", "age": "30"}, user_schema, silent(ErrorMode.SINGLE))
    assert result.messages == ['Expected user.age ("30") to be "number"']


def test_single_mode_stops_at_first_failure() -> None:
    calls: list = []

    def is_tracked(value, context=None) -> bool:
        calls.append(value)
        return True

    schema = {"name": is_string, "tracked": is_tracked}
    validate_object({"name": 1, "tracked": "x"}, schema, silent(ErrorMode.SINGLE))
    assert calls == []

    validate_object({"name": 1, "tracked": "x"}, schema, silent(ErrorMode.MULTI))
    assert calls == ["x"]


def test_property_validators_get_no_context() -> None:
    seen: list = []

    def is_anything(value, context=None) -> bool:
        seen.append(context)
        return False

    validate_object({"a": 1}, {"a": is_anything}, ReportingContext("user", seen.append, ErrorMode.SINGLE))
    assert seen == [None]


def test_multi_mode_reports_every_failing_key_in_order(user_schema) -> None:
    result = validate_object({"name": 123, "age": "30"}, user_schema, silent(ErrorMode.MULTI))

    assert [e.field_path for e in result.errors] == ["user.name", "user.age"]
    assert result.messages == [
        'Expected user.name (123) to be "string"',
        'Expected user.age ("30") to be "number"',
    ]


def test_multi_mode_builds_one_child_per_key(user_schema) -> None:
    result = validate_object({"name": "John", "age": "30"}, user_schema, silent(ErrorMode.MULTI))

    assert list(result.tree.children) == ["name", "age"]
    assert result.tree.children["name"].valid
    assert not result.tree.children["age"].valid
    assert result.tree.expected_type == "object"


def test_missing_key_is_reported_as_undefined(user_schema) -> None:
    result = validate_object({"name": "John"}, user_schema, silent(ErrorMode.MULTI))

    assert result.messages == ['Expected user.age (undefined) to be "number"']
    assert result.errors[0].actual_value is MISSING


@pytest.mark.parametrize(
    ("value", "rendered"),
    [("nope", '"nope"'), (None, "null"), ([1, 2], "[1,2]"), (42, "42")],
)
def test_non_object_values_fail_before_any_property(user_schema, value, rendered) -> None:
    result = validate_object(value, user_schema, silent(ErrorMode.MULTI))

    assert not result.valid
    assert result.messages == [f'Expected user ({rendered}) to be "non-null object"']
    assert result.tree.expected_type == "non-null object"
    assert result.tree.is_leaf


def test_json_mode_keeps_non_object_error_on_tree_only(user_schema) -> None:
    result = validate_object("nope", user_schema, silent(ErrorMode.JSON))

    assert not result.valid
    assert result.errors == ()
    assert [e.message for e in result.tree.errors] == ['Expected user ("nope") to be "non-null object"']


def test_json_mode_nested_tree() -> None:
    schema = {"profile": is_type({"age": is_number})}
    result = validate_object({"profile": {"age": "25"}}, schema, silent(ErrorMode.JSON))

    assert not result.valid
    profile = result.tree.children["profile"]
    age = profile.children["age"]
    assert not profile.valid
    assert age.actual_value == "25"
    assert age.expected_type == "number"
    assert create_simplified_tree(result.tree) == {
        "user": {
            "valid": False,
            "value": {
                "profile": {
                    "valid": False,
                    "value": {"age": {"valid": False, "value": "25", "expectedType": "number"}},
                }
            },
        }
    }


@pytest.mark.parametrize("mode", list(ErrorMode))
def test_failing_leaf_path_joins_every_identifier(mode) -> None:
    is_root = is_type({"a": {"b": {"c": is_string}}})
    result = is_root.validate({"a": {"b": {"c": 1}}}, silent(mode))

    assert not result.valid
    leaf = result.tree.find("user.a.b.c")
    assert leaf is not None and not leaf.valid
    if mode is not ErrorMode.JSON or result.errors:
        assert [e.field_path for e in result.errors] == ["user.a.b.c"]


def test_nested_failures_surface_at_leaf_paths_in_multi_mode() -> None:
    schema = {
        "name": is_string,
        "address": is_type({"street": is_string, "zip_code": is_number}),
    }
    result = validate_object({"name": 1, "address": {"street": 2, "zip_code": "x"}}, schema, silent(ErrorMode.MULTI))

    assert [e.field_path for e in result.errors] == ["user.name", "user.address.street", "user.address.zip_code"]


def test_nested_non_object_is_reported_at_property_path() -> None:
    schema = {"address": is_type({"street": is_string})}
    result = validate_object({"address": "Main St"}, schema, silent(ErrorMode.MULTI))

    assert result.messages == ['Expected user.address ("Main St") to be "non-null object"']


@pytest.mark.parametrize("mode", list(ErrorMode))
def test_validation_is_idempotent(user_schema, mode) -> None:
    value = {"name": 123, "age": "30"}
    assert validate_object(value, user_schema, silent(mode)) == validate_object(value, user_schema, silent(mode))


def test_validate_property_scopes_result_to_property_path() -> None:
    context = silent(ErrorMode.MULTI)

    passed = validate_property("name", "John", is_string, context)
    failed = validate_property("age", "30", is_number, context)

    assert passed.valid and passed.tree.path == "user.name" and passed.tree.expected_type == "string"
    assert not failed.valid
    assert failed.tree.errors == failed.errors
    assert failed.errors[0].field_path == "user.age"


def test_validate_property_runs_composites_structurally(messages) -> None:
    context = ReportingContext("user", messages.append, ErrorMode.SINGLE)
    result = validate_property("profile", {"age": "25"}, is_type({"age": is_number}), context)

    assert result.messages == ['Expected user.profile.age ("25") to be "number"']
    assert messages == []


@pytest.mark.parametrize("mode", list(ErrorMode))
def test_unserializable_values_are_mismatches(mode) -> None:
    loop: list = []
    loop.append(loop)

    result = validate_object({"name": b"\xff", "tags": loop}, {"name": is_string, "tags": is_string}, silent(mode))

    assert not result.valid
    expected = ['Expected user.name (b\'\\xff\') to be "string"', 'Expected user.tags ([[...]]) to be "string"']
    if mode is ErrorMode.MULTI:
        assert result.messages == expected
    elif mode is ErrorMode.SINGLE:
        assert result.messages == expected[:1]


def test_json_tree_renders_unserializable_values(messages) -> None:
    is_item = is_type({"name": is_string})

    is_item({"name": b"\xff"}, ReportingContext("item", messages.append, ErrorMode.JSON))

    assert len(messages) == 1
    assert json.loads(messages[0]) == {
        "item": {"valid": False, "value": {"name": {"valid": False, "value": "b'\\xff'", "expectedType": "string"}}},
    }


def test_dotted_schema_keys_keep_their_own_tree_entries() -> None:
    schema = {"x.a": is_type({"b": is_number}), "y.a": is_string}

    result = validate_object({"x.a": {"b": "1"}, "y.a": "s"}, schema, silent(ErrorMode.JSON))

    assert list(result.tree.children) == ["x.a", "y.a"]
    assert result.messages == ['Expected user.x.a.b ("1") to be "number"']
    assert list(create_simplified_tree(result.tree)["user"]["value"]) == ["x.a", "y.a"]
