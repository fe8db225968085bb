"""Client module for the OpenSea API."""

from .client import OpenseaClient
from .errors import (
    CancellationError,
    ClientError,
    DecodeError,
    ProtocolError,
    RemoteRejection,
    TransportError,
)

__all__ = [
    "OpenseaClient",
    "ClientError",
    "TransportError",
    "CancellationError",
    "DecodeError",
    "RemoteRejection",
    "ProtocolError",
]
