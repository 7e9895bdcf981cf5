import json
import logging

import pytest
import structlog

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.api.errors import ClockifyApiError, MissingApiKeyError
from clockify_mcp_server.logging_config import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    # pytest installs its own capture handlers per test phase
    root.handlers = []
    root.setLevel(level)
    structlog.reset_defaults()


def _events(stderr):
    return [json.loads(line) for line in stderr.splitlines() if line.strip()]


@pytest.mark.asyncio
async def test_logs_go_to_stderr_as_json(fake, capsys, restore_logging):
    configure_logging("DEBUG")
    fake.add("GET", "/workspaces/w1/projects/p1", status=404, text="Project not found")
    client = ClockifyApiClient(api_key="secret-key", transport=fake.transport)

    with pytest.raises(ClockifyApiError):
        await client.get("/workspaces/w1/projects/p1")
    with pytest.raises(MissingApiKeyError):
        await ClockifyApiClient(api_key=None, transport=fake.transport).get("/user")
    structlog.get_logger("tests").info("headers_seen", **{"X-Api-Key": "secret-key"})

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "secret-key" not in captured.err

    events = {event["event"]: event for event in _events(captured.err)}
    assert events["clockify_api_error"]["status_code"] == 404
    assert events["clockify_api_error"]["level"] == "warning"
    assert events["clockify_api_error"]["endpoint"] == "/workspaces/w1/projects/p1"
    assert events["clockify_api_key_missing"]["level"] == "warning"
    assert events["headers_seen"]["X-Api-Key"] == "[REDACTED]"


def test_http_client_loggers_are_quietened(restore_logging):
    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("mcp").level == logging.WARNING
