"""OpenSea API client - typed async access to NFT asset metadata and listings."""

from .client import (
    CancellationError,
    ClientError,
    DecodeError,
    OpenseaClient,
    ProtocolError,
    RemoteRejection,
    TransportError,
)
from .config import OpenseaSettings, load_settings
from .shared.models import (
    Asset,
    AssetsQueryParams,
    AssetsResponse,
    Network,
    OrderDirection,
)

__all__ = [
    "OpenseaClient",
    "OpenseaSettings",
    "load_settings",
    "Network",
    "Asset",
    "AssetsResponse",
    "AssetsQueryParams",
    "OrderDirection",
    "ClientError",
    "TransportError",
    "CancellationError",
    "DecodeError",
    "RemoteRejection",
    "ProtocolError",
]
