"""Environment-based configuration for the OpenSea API client."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .shared.models import Network

logger = logging.getLogger(__name__)


class OpenseaSettings(BaseModel):
    """Settings needed to construct an OpenseaClient."""

    api_key: str = Field(repr=False)
    network: Network = Network.MAINNET
    base_url: str | None = None


def load_settings(env_file: str | None = ".env") -> OpenseaSettings:
    """Load client settings from the environment.

    Reads ``OPENSEA_API_KEY`` (required), ``OPENSEA_NETWORK`` (``mainnet`` or
    ``rinkeby``, default ``mainnet``) and ``OPENSEA_API_URL`` (optional
    override). Values in ``env_file`` are loaded first but never override
    variables already set in the process environment.

    Raises:
        ValueError: If no API key is configured or the network is unknown.

    """
    if env_file and load_dotenv(env_file):
        logger.debug(f"Loaded environment from {env_file}")

    api_key = os.environ.get("OPENSEA_API_KEY")
    if not api_key:
        raise ValueError("OPENSEA_API_KEY is not set")

    return OpenseaSettings(
        api_key=api_key,
        network=Network(os.environ.get("OPENSEA_NETWORK", Network.MAINNET.value)),
        base_url=os.environ.get("OPENSEA_API_URL") or None,
    )
