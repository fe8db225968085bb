"""Decoding of API response bodies into typed models."""

from http import HTTPStatus
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..shared.models import ErrorEnvelope
from .errors import DecodeError, ProtocolError, RemoteRejection

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(status: int, body: bytes, model: type[ModelT]) -> ModelT:
    """Decode a response body or classify the failure.

    A 200 body is validated against ``model``. Any other status is read as an
    ``ErrorEnvelope`` and only its ``success`` flag is consulted.

    Args:
        status: HTTP status code of the response.
        body: The full response body.
        model: The pydantic model expected on success.

    Returns:
        ModelT: The decoded model.

    Raises:
        DecodeError: If the body (or error envelope) is not valid for its shape.
        RemoteRejection: If the envelope reports ``success: false``.
        ProtocolError: If the envelope reports ``success: true`` on a failed status.

    """
    if status == HTTPStatus.OK:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(str(e)) from e

    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e

    if not envelope.success:
        raise RemoteRejection()

    raise ProtocolError(status, body.decode("utf-8", errors="replace"))
