"""Lightweight base client with core aiohttp functionality."""

import asyncio
import logging
from typing import Any

import aiohttp

from .decoder import ModelT, decode_response
from .errors import CancellationError, ClientError, TransportError

logger = logging.getLogger(__name__)

# Connection pool defaults. These tune performance only.
DEFAULT_POOL_SIZE = 100
DEFAULT_KEEPALIVE_TIMEOUT = 90.0
DEFAULT_CONNECT_TIMEOUT = 30.0


def create_default_session() -> aiohttp.ClientSession:
    """Create the aiohttp session used when no session is supplied.

    Keep-alive is enabled with a generous idle timeout, proxies are read from
    the environment and only connection setup is time-bounded. Per-call
    deadlines are left to the caller.
    """
    connector = aiohttp.TCPConnector(
        limit=DEFAULT_POOL_SIZE,
        keepalive_timeout=DEFAULT_KEEPALIVE_TIMEOUT,
    )
    timeout = aiohttp.ClientTimeout(
        total=None,
        connect=DEFAULT_CONNECT_TIMEOUT,
        sock_connect=DEFAULT_CONNECT_TIMEOUT,
    )
    return aiohttp.ClientSession(connector=connector, timeout=timeout, trust_env=True)


class BaseClient:
    """Authenticated GET transport for the OpenSea API."""

    def __init__(self, base_url: str, api_key: str):
        """Initialize base client with URL and API key."""
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._session: aiohttp.ClientSession | None = None
        self._supplied_session: aiohttp.ClientSession | None = None
        self._owns_session = False
        self._ref_count: int = 0

    def __repr__(self) -> str:
        """Represent the client without exposing the API key."""
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Open a session if needed and increment reference count.

        A session supplied with ``set_session`` is reused on every connect;
        otherwise a default session is created and owned by this client.
        """
        if self._session is None:
            if self._supplied_session is not None:
                self._session = self._supplied_session
                self._owns_session = False
            else:
                self._session = create_default_session()
                self._owns_session = True
        self._ref_count += 1

    async def close(self):
        """Close an owned aiohttp session when reference count reaches zero."""
        # Don't let ref count go below 0
        self._ref_count = max(self._ref_count - 1, 0)

        if self._ref_count == 0 and self._session:
            session = self._session
            owned = self._owns_session
            self._session = None
            self._owns_session = False
            if owned:
                await session.close()

    def set_session(self, session: aiohttp.ClientSession) -> None:
        """Replace the HTTP session used for requests.

        A supplied session belongs to the caller and is never closed by this
        client. It stays in use across close and reconnect.

        Raises:
            ClientError: If the client is connected with a session it owns.
                Close the client before swapping.

        """
        if self._session is not None and self._owns_session:
            raise ClientError(
                "Cannot replace the session while the client's own session is open."
            )
        self._supplied_session = session
        if self._session is not None:
            self._session = session

    def build_url(self, path: str, query: str = "") -> str:
        """Build a complete URL from an API path and an encoded query string."""
        url = self.base_url + "/" + path.lstrip("/")
        if query:
            url += "?" + query
        return url

    async def fetch(self, url: str) -> tuple[int, bytes]:
        """Send an authenticated GET and return the status and full body.

        The status is not interpreted here.

        Raises:
            ClientError: If the client is not connected.
            TransportError: If no HTTP response could be obtained.

        """
        if not self._session:
            raise ClientError(
                "Client is not connected. You must call connect before request."
            )

        headers = {"X-API-KEY": self._api_key, "Accept": "application/json"}
        logger.debug(f"GET {url}")
        try:
            async with self._session.request("GET", url, headers=headers) as response:
                body = await response.read()
                logger.debug(f"GET {url} -> {response.status} ({len(body)} bytes)")
                return response.status, body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"GET {url} failed: {e}") from e

    async def get(
        self,
        path: str,
        response_model: type[ModelT],
        query: str = "",
        timeout: float | None = None,
    ) -> ModelT:
        """Fetch an API path and decode the response into ``response_model``.

        Args:
            path: API path relative to the base URL.
            response_model: The pydantic model expected on success.
            query: Already-encoded query string, if any.
            timeout: Optional deadline for the call in seconds.

        Cancelling the calling task propagates ``asyncio.CancelledError``
        unchanged and nothing is decoded.

        Raises:
            CancellationError: If the deadline expires before a response is
                received.

        """
        url = self.build_url(path, query)
        if timeout is not None and timeout <= 0:
            raise CancellationError("Deadline exceeded before request was sent")

        try:
            async with asyncio.timeout(timeout):
                status, body = await self.fetch(url)
        except TimeoutError as e:
            raise CancellationError(f"Deadline exceeded for GET {url}") from e

        return decode_response(status, body, response_model)
