"""
Exceptions raised by the Clockify API client.

Tools let these propagate; FastMCP reports the call as failed with the
exception text, so the upstream status code and body reach the caller.
"""


class ClockifyError(Exception):
    """Base class for every error raised while talking to Clockify."""


class MissingApiKeyError(ClockifyError):
    """No API key was supplied by the request or the server configuration."""

    def __init__(self):
        super().__init__(
            "Clockify API key missing. Send an X-Api-Key or "
            "'Authorization: Bearer' header, or set CLOCKIFY_API_KEY"
        )


class ClockifyApiError(ClockifyError):
    """Clockify answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Clockify API error ({status_code}): {body}")


class ClockifyRequestError(ClockifyError):
    """The request never produced a response (DNS, connect, timeout...)."""
