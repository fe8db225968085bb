"""Base resource class for API resources."""

from ..base import BaseClient
from ..decoder import ModelT


class BaseResource:
    """Base class for API resources sharing one transport."""

    def __init__(self, base_client: BaseClient):
        """Initialize resource with base client.

        Args:
            base_client: The BaseClient instance for making HTTP requests

        """
        self._base_client = base_client

    async def request(
        self,
        path: str,
        response_model: type[ModelT],
        query: str = "",
        timeout: float | None = None,
    ) -> ModelT:
        """Make a GET request and decode the response.

        Args:
            path: API endpoint path
            response_model: The pydantic model expected on success
            query: Optional encoded query string
            timeout: Optional deadline for the call in seconds

        Returns:
            ModelT: The decoded response

        """
        return await self._base_client.get(path, response_model, query, timeout)
