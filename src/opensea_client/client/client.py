"""Main OpenseaClient with modular resource access."""

from typing import TYPE_CHECKING, Any

import aiohttp

from ..shared.models import Network
from .base import BaseClient
from .resources import AssetsResource

if TYPE_CHECKING:
    from ..config import OpenseaSettings


class OpenseaClient:
    """Client for the OpenSea v1 REST API with modular resource access.

    Usage:
        async with OpenseaClient.mainnet(api_key) as client:
            page = await client.assets.list(AssetsQueryParams(owner=owner))
            asset = await client.assets.get(contract_address, 42)
    """

    def __init__(
        self,
        api_key: str,
        network: Network | str = Network.MAINNET,
        base_url: str | None = None,
    ):
        """Initialize the client for a network, or an explicit base URL."""
        self.network = Network(network)
        self._base_client = BaseClient(base_url or self.network.base_url, api_key)

        self.assets = AssetsResource(self._base_client)

    @classmethod
    def mainnet(cls, api_key: str) -> "OpenseaClient":
        """Create a client for the production API."""
        return cls(api_key, Network.MAINNET)

    @classmethod
    def rinkeby(cls, api_key: str) -> "OpenseaClient":
        """Create a client for the Rinkeby test network API."""
        return cls(api_key, Network.RINKEBY)

    @classmethod
    def from_settings(cls, settings: "OpenseaSettings") -> "OpenseaClient":
        """Create a client from loaded settings."""
        return cls(settings.api_key, settings.network, settings.base_url)

    def __repr__(self) -> str:
        """Represent the client without exposing the API key."""
        return f"OpenseaClient(base_url={self.base_url!r})"

    @property
    def base_url(self) -> str:
        """Get the API endpoint requests are sent to."""
        return self._base_client.base_url

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
        """Connect the underlying base client (increments reference count)."""
        await self._base_client.connect()

    async def close(self):
        """Close the underlying base client (decrements reference count)."""
        await self._base_client.close()

    def set_session(self, session: aiohttp.ClientSession) -> None:
        """Use a caller-owned aiohttp session for all requests.

        Args:
            session: The session to use. It is not closed by this client.

        """
        self._base_client.set_session(session)
