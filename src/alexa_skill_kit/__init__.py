"""Typed request/response models for Alexa skills."""

from .codec import dump_response, dump_response_json, parse_request, parse_request_json
from .errors import AlexaSkillKitError, EnvelopeDecodeError
from .models import RequestEnvelope, ResponseEnvelope

__version__ = "0.1.0"

__all__ = [
    "RequestEnvelope",
    "ResponseEnvelope",
    "parse_request",
    "parse_request_json",
    "dump_response",
    "dump_response_json",
    "AlexaSkillKitError",
    "EnvelopeDecodeError",
]
