"""
Per-request Clockify credentials.

Over HTTP transports a client may send its own key, either as
`X-Api-Key: <key>` or `Authorization: Bearer <key>`. Over stdio there is no
request, and the configured CLOCKIFY_API_KEY is used instead.
"""

from typing import Optional

from mcp.server.fastmcp import Context


def api_key_from_headers(headers) -> Optional[str]:
    """
    Extract an API key from a mapping of HTTP headers.

    Args:
        headers: Case-insensitive header mapping (e.g. starlette Headers)

    Returns:
        str: The key, or None when neither header is present
    """
    api_key = headers.get("x-api-key")
    if api_key and api_key.strip():
        return api_key.strip()

    authorization = headers.get("authorization") or ""
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()

    return None


def api_key_from_context(ctx: Optional[Context]) -> Optional[str]:
    """
    Return the API key sent with the HTTP request behind a tool call, if any.
    """
    if ctx is None:
        return None

    try:
        request = ctx.request_context.request
    except ValueError:
        # Called outside of a request
        return None

    if request is None or not hasattr(request, "headers"):
        return None

    return api_key_from_headers(request.headers)
