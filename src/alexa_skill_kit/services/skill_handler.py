"""Hello World skill request handling."""

import logging

from ..config import settings
from ..models.locale import Language, Region
from ..models.request import IntentName, RequestEnvelope, RequestType
from ..models.response import Card, ResponseEnvelope, Speech

logger = logging.getLogger(__name__)

GREETINGS_ATTRIBUTE = "greetings"


def _greeting(envelope: RequestEnvelope) -> str:
    """Pick a greeting from the request locale, falling back to the name slot."""
    match envelope.locale().parts():
        case (Language.English, Region.Australia):
            return "G'day mate"
        case (Language.German, _):
            return "Hallo Welt"
        case (Language.Japanese, _):
            return "こんにちは世界"

    name = envelope.slot_value("name")
    if name:
        return f"hello {name}"
    return "hello world"


def _greeting_count(envelope: RequestEnvelope) -> int:
    previous = envelope.attribute_value(GREETINGS_ATTRIBUTE)
    if previous is None or not previous.isdigit():
        return 1
    return int(previous) + 1


def _handle_hello(envelope: RequestEnvelope) -> ResponseEnvelope:
    # Session stays open so the greeting count comes back on the next turn.
    greeting = _greeting(envelope)
    response = (
        ResponseEnvelope.new(False)
        .with_card(Card.simple("hello", greeting))
        .with_speech(Speech.plain(greeting))
        .with_reprompt(Speech.plain("Say hello to someone else, or say stop."))
    )
    response.add_attribute(GREETINGS_ATTRIBUTE, str(_greeting_count(envelope)))
    return response


def _handle_help() -> ResponseEnvelope:
    return ResponseEnvelope.simple("hello", "to say hello, tell me: say hello to someone")


def handle_request(envelope: RequestEnvelope) -> ResponseEnvelope:
    """
    Process a decoded Alexa request and build the response.

    Supported requests:
    - LaunchRequest: Welcome message, session stays open
    - AMAZON.HelpIntent: Usage instructions
    - AMAZON.CancelIntent / AMAZON.StopIntent: End the session
    - Any custom intent: Locale-aware greeting, session stays open
    - SessionEndedRequest: Empty response

    Args:
        envelope: Decoded request envelope

    Returns:
        Response envelope
    """
    request_type = envelope.request_type()

    logger.info(f"Alexa request type: {request_type.value}")

    if request_type == RequestType.LaunchRequest:
        return (
            ResponseEnvelope.new(False)
            .with_speech(Speech.plain(f"Welcome to {settings.skill_name}. Say hello to someone."))
            .with_reprompt(Speech.plain("Try saying: say hello to Bob."))
        )

    if request_type == RequestType.IntentRequest:
        intent = envelope.intent_type()

        logger.info(f"Alexa intent: {intent.value if intent is not None else None}")

        if intent == IntentName.Help:
            return _handle_help()

        if intent in (IntentName.Cancel, IntentName.Stop):
            return ResponseEnvelope.end()

        if intent is not None and not intent.is_known:
            return _handle_hello(envelope)

    if request_type == RequestType.SessionEndedRequest:
        logger.info(f"Session ended: {envelope.request.reason.value if envelope.request.reason else 'unknown'}")
        return ResponseEnvelope.end()

    # Unsupported request type or built-in intent
    return (
        ResponseEnvelope.new(False)
        .with_speech(Speech.plain("I'm not sure how to help with that. Try saying: say hello."))
    )
