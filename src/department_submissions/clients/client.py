"""Base client for JSON network requests."""

import logging
from typing import Any

import httpx

from department_submissions.exceptions import NetworkError, UpstreamError

logger = logging.getLogger(__name__)

MESSAGE_FIELDS = ("detail", "error", "message")
DEFAULT_HEADERS = {"Accept": "application/json"}


def parse_json(response: httpx.Response) -> Any:
    """Parse a response body as JSON, treating empty or invalid bodies as ``{}``."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}


def extract_message(data: Any, fallback: str) -> str:
    """Pull a human-readable message out of a conventional error envelope."""
    if isinstance(data, dict):
        for field in MESSAGE_FIELDS:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                return value
    return fallback


class Client:
    """Base class for network clients.

    Provides a lazy-initialized httpx.AsyncClient with async context manager
    support, configurable timeout and headers via dict config. Every call is
    a single attempt; failures are surfaced to the caller, never retried.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 30)
        headers: Additional headers to include in requests
        transport: Optional httpx transport (e.g. httpx.MockTransport)
    """

    fallback_message = "Request failed"

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"]).rstrip("/")

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, **self._config.get("headers", {})}

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                transport=self._config.get("transport"),
            )
        return self._client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _handle_response(self, response: httpx.Response, fallback: str) -> Any:
        """Map a response to its parsed body or an UpstreamError.

        Args:
            response: The HTTP response to check
            fallback: Message used when the body carries none

        Returns:
            The parsed JSON body (``{}`` when empty or not JSON)

        Raises:
            UpstreamError: For any non-2xx response
        """
        data = parse_json(response)
        if response.is_success:
            return data

        message = extract_message(data, fallback)
        logger.warning(f"Upstream error {response.status_code} from {response.url}: {message}")
        raise UpstreamError(message, status_code=response.status_code, body=data)

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Issue exactly one request, mapping httpx failures to NetworkError."""
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"Transport error on {method} {path}: {e}")
            raise NetworkError(f"Unable to reach {self.base_url}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Unreadable response for {method} {path}: {e}")
            raise NetworkError(f"Invalid response from {self.base_url}") from e

    async def post(self, path: str, payload: Any, fallback: str | None = None) -> Any:
        """POST a JSON payload and return the parsed response body.

        Args:
            path: URL path (appended to base_url)
            payload: JSON-serialisable request body
            fallback: Error message used when the response carries none

        Returns:
            The parsed JSON body of a 2xx response

        Raises:
            UpstreamError: If the service returns a non-2xx response
            NetworkError: If the request never receives a response
        """
        response = await self._send("POST", path, json=payload)
        return self._handle_response(response, fallback or self.fallback_message)
