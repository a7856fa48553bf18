"""Tests for settings validation, the error hierarchy and small shared utilities."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.shared.config.settings import Settings
from app.shared.core.exceptions import (
    AuthorizationError,
    DuplicateResourceError,
    InvalidStateError,
    PlantCareException,
    PlantNotFoundError,
    TransactionError,
    ValidationError,
    exception_to_dict,
    is_client_error,
)
from app.shared.utils.helpers import ensure_utc, hours_from_now
from app.shared.utils.logging import correlation_id_var, log_context, user_id_var


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


# ------------------------------------------------------------------
# settings
# ------------------------------------------------------------------


def test_settings_defaults():
    settings = _settings()
    assert settings.POINTS_PER_LEVEL == 100
    assert settings.ANALYSIS_POINTS == 15
    assert settings.TASK_COMPLETION_POINTS == 10
    assert (settings.URGENT_TASK_DUE_HOURS, settings.RECOMMENDED_TASK_DUE_HOURS) == (24, 72)


def test_database_url_built_from_parts():
    settings = _settings(DATABASE_URL=None, DB_USER="fern", DB_PASSWORD="pw", DB_HOST="db", DB_NAME="garden")
    assert settings.database_url == "postgresql+asyncpg://fern:pw@db:5432/garden"
    assert not settings.is_sqlite


def test_explicit_database_url_wins():
    settings = _settings(DATABASE_URL="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.is_sqlite


def test_environment_and_log_values_are_normalized():
    settings = _settings(ENVIRONMENT="Production", LOG_LEVEL="debug", LOG_FORMAT="TEXT")
    assert settings.is_production
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


@pytest.mark.parametrize(
    "overrides",
    [
        {"ENVIRONMENT": "moon"},
        {"LOG_LEVEL": "LOUD"},
        {"LOG_FORMAT": "xml"},
        {"POINTS_PER_LEVEL": 0},
        {"URGENT_TASK_DUE_HOURS": -1},
        {"ANALYSIS_POINTS": -5},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(PydanticValidationError):
        _settings(**overrides)


# ------------------------------------------------------------------
# exceptions
# ------------------------------------------------------------------


def test_not_found_error_shape():
    error = PlantNotFoundError(7, user_id=3)
    payload = error.to_dict()["error"]

    assert error.status_code == 404
    assert payload["code"] == "NOT_FOUND"
    assert payload["details"] == {"user_id": "3", "resource_type": "plant", "resource_id": "7"}


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ValidationError("bad", field="name"), 422),
        (AuthorizationError(resource_type="plant", resource_id=1, user_id=2), 403),
        (DuplicateResourceError(resource_type="user", field="username", value="fern"), 409),
        (InvalidStateError(resource_type="task", resource_id=1, current_state="completed"), 409),
        (TransactionError(), 500),
    ],
)
def test_status_codes(error, status_code):
    assert error.status_code == status_code
    assert isinstance(error, PlantCareException)
    assert is_client_error(error) == (status_code < 500)


def test_http_exception_conversion():
    http_error = AuthorizationError(resource_type="task").to_http_exception()
    assert http_error.status_code == 403
    assert http_error.detail["code"] == "AUTHORIZATION_ERROR"


def test_foreign_exception_to_dict():
    payload = exception_to_dict(KeyError("x"))
    assert payload["error"]["code"] == "KEYERROR"
    assert payload["error"]["status_code"] == 500
    assert not is_client_error(KeyError("x"))


# ------------------------------------------------------------------
# utilities
# ------------------------------------------------------------------


def test_ensure_utc():
    naive = datetime(2026, 1, 1, 12, 0)
    assert ensure_utc(naive).tzinfo is timezone.utc
    shifted = datetime(2026, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(shifted) == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert ensure_utc(None) is None


def test_hours_from_now():
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert hours_from_now(72, base) == datetime(2026, 1, 4, tzinfo=timezone.utc)


def test_log_context_sets_and_resets():
    with log_context(user_id=5, correlation_id="abc") as context:
        assert context["user_id"] == 5
        assert user_id_var.get() == "5"
        assert correlation_id_var.get() == "abc"
    assert user_id_var.get() == ""
    assert correlation_id_var.get() == ""
