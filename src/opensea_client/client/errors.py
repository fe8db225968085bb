"""Exceptions raised by the OpenSea API client."""


class ClientError(Exception):
    """Base exception for client errors."""

    pass


class TransportError(ClientError):
    """The request failed before any HTTP response was received."""

    pass


class CancellationError(ClientError):
    """The deadline of a call expired before a response was received."""

    pass


class DecodeError(ClientError):
    """A response body could not be decoded into the expected shape."""

    pass


class RemoteRejection(ClientError):
    """The API answered with a non-200 status and ``{"success": false}``."""

    def __init__(self, message: str = "Not success"):
        """Initialize with the fixed rejection message."""
        super().__init__(message)


class ProtocolError(ClientError):
    """The API answered with a non-200 status but claimed success."""

    def __init__(self, status: int, body: str):
        """Initialize protocol error with status and raw body."""
        self.status = status
        self.body = body
        super().__init__(f"Backend returns status {status} msg: {body}")
