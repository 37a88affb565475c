"""Tests for check, parse, assert_valid and collect_errors."""

import pytest

from shapeguard.core.errors import ErrorCode, Ok, SchemaDefinitionError
from shapeguard.validation import (
    ErrorMode,
    ValidationError,
    assert_valid,
    check,
    collect_errors,
    is_string,
    is_type,
    parse,
)


def test_parse_returns_ok_for_valid_value(is_user) -> None:
    value = {"name": "John", "age": 30}
    result = parse(value, is_user)

    assert result == Ok(value)
    assert result.unwrap() is value


def test_parse_single_error(is_user) -> None:
    result = parse({"name": 123, "age": 30}, is_user, error_mode=ErrorMode.SINGLE)

    assert result.is_err()
    error = result.unwrap_err()
    assert error.code is ErrorCode.E2004_INVALID_TYPE
    assert error.message == 'Expected value.name (123) to be "string"'
    assert error.origin == "parse"
    assert error.metadata["field"] == "value.name"


def test_parse_missing_key(is_user) -> None:
    error = parse({"name": "John"}, is_user, error_mode="single").unwrap_err()

    assert error.code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
    assert error.message == 'Expected value.age (undefined) to be "number"'
    assert "value" not in error.metadata


def test_parse_multi_mode_collects_every_error(is_user) -> None:
    error = parse({"name": 1, "age": "x"}, is_user, error_mode="multi").unwrap_err()

    assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
    assert error.metadata["error_count"] == 2
    assert error.metadata["error_mode"] == "multi"
    assert [e["field"] for e in error.metadata["errors"]] == ["value.name", "value.age"]


def test_parse_json_mode_non_object(is_user) -> None:
    error = parse("oops", is_user, error_mode="json").unwrap_err()

    assert error.code is ErrorCode.E2006_NOT_AN_OBJECT
    assert error.message == 'Expected value ("oops") to be "non-null object"'


def test_assert_valid(is_user) -> None:
    value = {"name": "John", "age": 30}
    assert assert_valid(value, is_user) is value

    with pytest.raises(ValidationError) as exc_info:
        assert_valid({"name": "John", "age": None}, is_user, identifier="user", error_mode="multi")

    assert str(exc_info.value) == 'Expected user.age (null) to be "number"'
    assert list(exc_info.value.field_errors) == ["user.age"]
    assert exc_info.value.mode is ErrorMode.MULTI


def test_check_with_primitive_validator() -> None:
    result = check(1, is_string, identifier="name")

    assert not result.valid
    assert result.messages == ['Expected name (1) to be "string"']
    assert result.tree.path == "name"
    assert check("x", is_string).valid


def test_check_never_reports(is_user, messages) -> None:
    result = check({"name": 1}, is_user, error_mode="multi")

    assert [e.field_path for e in result.errors] == ["value.name", "value.age"]
    assert messages == []


def test_collect_errors(is_user) -> None:
    assert collect_errors(is_user, {"name": 1, "age": "x"}, identifier="user") == [
        'Expected user.name (1) to be "string"',
        'Expected user.age ("x") to be "number"',
    ]
    assert collect_errors(is_user, {"name": 1, "age": "x"}, identifier="user", error_mode="single") == [
        'Expected user.name (1) to be "string"',
    ]
    assert collect_errors(is_user, {"name": "a", "age": 1}) == []


def test_parse_result_composes(is_user) -> None:
    good = parse({"name": "John", "age": 30}, is_user)
    bad = parse({"name": "John"}, is_user)

    assert good.map(lambda user: user["name"]).unwrap() == "John"
    assert bad.map(lambda user: user["name"]).is_err()
    assert bad.unwrap_or(None) is None
    assert bad.match(ok=lambda user: "ok", err=lambda error: error.code.name) == "E2001_REQUIRED_FIELD_MISSING"
    assert bad.unwrap_err().to_dict()["error"]["category"] == "validation"

    match good:
        case Ok(user):
            assert user["age"] == 30
        case _:
            pytest.fail("expected Ok")


def test_parse_results_chain_and_iterate(is_user) -> None:
    value = {"name": "John", "age": 30}
    good = parse(value, is_user)
    bad = parse({"name": "John"}, is_user)

    assert good.and_then(lambda user: parse(user["name"], is_string)).unwrap() == "John"
    assert bad.and_then(lambda user: parse(user["name"], is_string)) is bad
    assert list(good) == [value]
    assert list(bad) == []


def test_schema_definition_error_converts_to_app_error() -> None:
    with pytest.raises(SchemaDefinitionError) as exc_info:
        is_type({"name": 5})

    error = exc_info.value.to_app_error()
    assert error.code is ErrorCode.E2030_INVALID_SCHEMA
    assert error.metadata == {"key": "name"}
    assert error.to_dict()["error"]["category"] == "schema"
