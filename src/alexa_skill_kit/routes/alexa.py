"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ..codec import dump_response, parse_request_json
from ..errors import EnvelopeDecodeError
from ..services.skill_handler import handle_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/alexa")
async def alexa_webhook(request: Request) -> dict[str, Any]:
    """
    Handle Alexa Skill requests.

    The body is decoded into a typed request envelope; unknown fields and
    unrecognized enumeration values are accepted. A structurally invalid
    envelope is rejected with 400.

    Supported requests:
    - LaunchRequest: "Alexa, open Hello World"
    - Custom intents: "Alexa, ask Hello World to say hello to Bob"
    - AMAZON.HelpIntent: "Alexa, ask Hello World for help"
    - AMAZON.StopIntent: "Alexa, stop"
    """
    body = await request.body()

    try:
        envelope = parse_request_json(body)
    except EnvelopeDecodeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Alexa request received: {envelope.request_type().value}")

    response = handle_request(envelope)

    return dump_response(response)
