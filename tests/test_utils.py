import json
from datetime import timedelta, timezone
from types import SimpleNamespace

import httpx
import pytest
from pydantic import ValidationError

from clockify_mcp_server.config import Settings
from clockify_mcp_server.logging_config import _scrub_sensitive
from clockify_mcp_server.utils.credentials import api_key_from_context, api_key_from_headers
from clockify_mcp_server.utils.formatting import deleted_message, format_json
from clockify_mcp_server.utils.timezone import TimezoneConverter


def _ctx(headers):
    request = SimpleNamespace(headers=httpx.Headers(headers))
    return SimpleNamespace(request_context=SimpleNamespace(request=request))


class _NoRequestContext:
    @property
    def request_context(self):
        raise ValueError("Context is not available outside of a request")


# -- credentials ------------------------------------------------------------


def test_api_key_header_is_used():
    assert api_key_from_headers(httpx.Headers({"X-Api-Key": " abc "})) == "abc"


def test_bearer_token_is_used():
    assert api_key_from_headers(httpx.Headers({"Authorization": "Bearer xyz"})) == "xyz"


def test_api_key_header_wins_over_bearer():
    headers = httpx.Headers({"Authorization": "Bearer xyz", "X-Api-Key": "abc"})
    assert api_key_from_headers(headers) == "abc"


@pytest.mark.parametrize("authorization", ["Basic dXNlcjpwYXNz", "Bearer ", "xyz"])
def test_other_authorization_schemes_are_ignored(authorization):
    assert api_key_from_headers(httpx.Headers({"Authorization": authorization})) is None


def test_context_with_http_request():
    assert api_key_from_context(_ctx({"x-api-key": "from-request"})) == "from-request"


def test_context_without_request():
    assert api_key_from_context(_NoRequestContext()) is None
    assert api_key_from_context(SimpleNamespace(request_context=SimpleNamespace(request=None))) is None
    assert api_key_from_context(None) is None


# -- timestamps -------------------------------------------------------------


@pytest.fixture
def converter():
    converter = TimezoneConverter()
    converter.local_tz = timezone(timedelta(hours=2))
    return converter


@pytest.mark.parametrize(
    "value",
    ["2024-01-15T09:00:00Z", "2024-01-15T09:00:00.000Z", "2024-01-15T09:00:00+05:30", "yesterday", "", None],
)
def test_timestamps_with_offset_or_unparseable_pass_through(converter, value):
    assert converter.to_api_timestamp(value) == value


def test_naive_timestamp_is_read_as_local_time(converter):
    assert converter.to_api_timestamp("2024-01-15T09:00:00") == "2024-01-15T07:00:00Z"


def test_current_utc_time_format(converter):
    now = converter.get_current_utc_time()
    assert now.endswith("Z")
    assert len(now) == len("2024-01-15T07:00:00Z")


def test_timezone_info(converter):
    info = converter.get_timezone_info()
    assert info["timezone_offset"] == "+0200"


# -- formatting -------------------------------------------------------------


def test_format_json_with_heading():
    assert format_json({"id": "p1"}, heading="Project created") == 'Project created:\n{\n  "id": "p1"\n}'


def test_format_json_keeps_unicode():
    assert json.loads(format_json([{"name": "Café"}])) == [{"name": "Café"}]
    assert "Café" in format_json([{"name": "Café"}])


def test_deleted_message():
    assert deleted_message("Time entry", "e1") == "Time entry e1 deleted successfully"


# -- config and logging -----------------------------------------------------


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.clockify_api_base == "https://api.clockify.me/api/v1"
    assert settings.api_key_value() is None
    assert settings.log_level == "INFO"


def test_settings_normalise_values():
    settings = Settings(
        _env_file=None,
        clockify_api_key="secret",
        clockify_api_base="https://eu.api.clockify.me/api/v1/",
        log_level="debug",
    )
    assert settings.api_key_value() == "secret"
    assert settings.clockify_api_base == "https://eu.api.clockify.me/api/v1"
    assert settings.log_level == "DEBUG"
    assert "secret" not in repr(settings)


@pytest.mark.parametrize(
    "overrides",
    [{"clockify_api_base": "http://api.clockify.me/api/v1"}, {"log_level": "LOUD"}, {"http_timeout": 0}],
)
def test_settings_reject_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_scrub_sensitive_redacts_credentials():
    event = {"event": "request", "X-Api-Key": "abc", "authorization": "Bearer abc", "endpoint": "/user"}

    scrubbed = _scrub_sensitive(None, "info", event)

    assert scrubbed["X-Api-Key"] == "[REDACTED]"
    assert scrubbed["authorization"] == "[REDACTED]"
    assert scrubbed["endpoint"] == "/user"
