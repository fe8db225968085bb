"""Assets resource for the OpenSea API client."""

from ...shared.models import Asset, AssetsQueryParams, AssetsResponse
from ..query import build_assets_query
from .base import BaseResource


class AssetsResource(BaseResource):
    """Asset-related client methods."""

    async def list(
        self,
        params: AssetsQueryParams | None = None,
        *,
        timeout: float | None = None,
    ) -> AssetsResponse:
        """Get one page of assets matching the given filters."""
        query = build_assets_query(params or AssetsQueryParams())
        return await self.request("/api/v1/assets", AssetsResponse, query, timeout)

    async def get(
        self,
        contract_address: str,
        token_id: int,
        *,
        timeout: float | None = None,
    ) -> Asset:
        """Get a single asset by contract address and token ID.

        The contract address is used as given; the token ID is rendered in
        base 10.

        Raises:
            TypeError: If the token ID is not an integer.
            ValueError: If the token ID is negative.

        """
        if isinstance(token_id, bool) or not isinstance(token_id, int):
            raise TypeError(
                f"token_id must be an int, got {type(token_id).__name__}"
            )
        if token_id < 0:
            raise ValueError(f"token_id must be non-negative, got {token_id}")
        path = f"/api/v1/asset/{contract_address}/{token_id}"
        return await self.request(path, Asset, timeout=timeout)
