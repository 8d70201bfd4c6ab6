"""Decoding inbound request envelopes and encoding outbound responses."""

import logging
from typing import Any

from pydantic import ValidationError

from .errors import EnvelopeDecodeError
from .models.request import RequestEnvelope
from .models.response import ResponseEnvelope

logger = logging.getLogger(__name__)


def parse_request(data: Any) -> RequestEnvelope:
    """
    Decode a request envelope from already-parsed JSON.

    Unknown fields and unrecognized enumeration values never fail.
    Missing or mistyped required fields fail the whole envelope.

    Raises:
        EnvelopeDecodeError: If the envelope is structurally invalid
    """
    try:
        envelope = RequestEnvelope.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected request envelope: {e.error_count()} validation error(s)")
        raise EnvelopeDecodeError.from_validation_error(e) from e

    logger.debug(f"Decoded {envelope.request_type().value} ({envelope.locale()})")
    return envelope


def parse_request_json(raw: str | bytes) -> RequestEnvelope:
    """Decode a request envelope from JSON text."""
    try:
        envelope = RequestEnvelope.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Rejected request envelope: {e.error_count()} validation error(s)")
        raise EnvelopeDecodeError.from_validation_error(e) from e

    logger.debug(f"Decoded {envelope.request_type().value} ({envelope.locale()})")
    return envelope


def dump_response(envelope: ResponseEnvelope) -> dict[str, Any]:
    """Encode a response envelope as a JSON-compatible dict."""
    return envelope.to_dict()


def dump_response_json(envelope: ResponseEnvelope) -> str:
    """Encode a response envelope as JSON text."""
    return envelope.to_json()
