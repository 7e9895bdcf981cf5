"""
Clockify API client for handling HTTP requests and authentication.
"""

import copy
from typing import Any, Dict, Optional

import httpx
import structlog

from clockify_mcp_server.api.errors import (
    ClockifyApiError,
    ClockifyRequestError,
    MissingApiKeyError,
)

log = structlog.get_logger(__name__)


class ClockifyApiClient:
    """
    API client for interacting with the Clockify API.

    Handles authentication and provides methods for making
    HTTP requests to the Clockify API endpoints.
    """

    BASE_URL = "https://api.clockify.me/api/v1"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Clockify API client.

        Args:
            api_key: Fallback Clockify API key. May be None when every request
                brings its own key (see `with_api_key`).
            base_url: Override for the API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by the tests to fake Clockify

        A missing key is only reported when a request is attempted.
        """
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def with_api_key(self, api_key: Optional[str]) -> "ClockifyApiClient":
        """
        Return a client bound to a request-scoped API key.

        The configured key stays the fallback: when `api_key` is empty the
        client itself is returned.
        """
        if not api_key:
            return self
        bound = copy.copy(self)
        bound.api_key = api_key
        return bound

    def _get_auth_headers(self) -> Dict[str, str]:
        if not self.api_key:
            log.warning("clockify_api_key_missing")
            raise MissingApiKeyError()

        return {
            "X-Api-Key": self.api_key,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> Any:
        """
        Send a request to the Clockify API.

        Args:
            method: HTTP method
            endpoint: API endpoint path (e.g., "/workspaces")
            params: Optional query parameters; None values are dropped
            data: Optional JSON body; None values are dropped from dict bodies

        Returns:
            The decoded JSON response, or an empty dict for empty responses

        Raises:
            MissingApiKeyError: no key available, nothing was sent
            ClockifyApiError: Clockify answered with a non-2xx status
            ClockifyRequestError: the request failed before a response arrived
        """
        headers = self._get_auth_headers()
        url = f"{self.base_url}{endpoint}"

        kwargs: Dict[str, Any] = {"headers": headers}
        if params:
            query = {k: v for k, v in params.items() if v is not None}
            if query:
                kwargs["params"] = query
        if data is not None:
            if isinstance(data, dict):
                data = {k: v for k, v in data.items() if v is not None}
            kwargs["json"] = data

        log.debug("clockify_request", method=method, endpoint=endpoint)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                log.warning("clockify_request_failed", method=method, endpoint=endpoint, error=str(e))
                raise ClockifyRequestError(f"Request to Clockify failed: {e}") from e

        if not response.is_success:
            log.warning(
                "clockify_api_error",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise ClockifyApiError(response.status_code, response.text)

        if response.status_code == 204 or not response.content:
            return {}

        return response.json()

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send a GET request to the Clockify API."""
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Send a POST request to the Clockify API."""
        return await self.request("POST", endpoint, data=data)

    async def put(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Send a PUT request to the Clockify API."""
        return await self.request("PUT", endpoint, data=data)

    async def patch(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """Send a PATCH request to the Clockify API."""
        return await self.request("PATCH", endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        """Send a DELETE request to the Clockify API."""
        return await self.request("DELETE", endpoint)
