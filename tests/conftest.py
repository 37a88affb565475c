"""Shared fixtures."""

import pytest

from shapeguard.core.config import get_settings
from shapeguard.validation import ErrorMode, ReportingContext, is_number, is_string, is_type


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def messages() -> list[str]:
    return []


@pytest.fixture
def user_schema() -> dict:
    return {"name": is_string, "age": is_number}


@pytest.fixture
def is_user(user_schema):
    return is_type(user_schema)


@pytest.fixture
def context_for(messages):
    def build(mode: ErrorMode | str = ErrorMode.SINGLE, identifier: str = "user") -> ReportingContext:
        return ReportingContext(identifier=identifier, callback_on_error=messages.append, error_mode=mode)
    return build
