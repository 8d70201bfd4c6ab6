"""Shared fixtures: HTTP client and Alexa request payloads."""

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from alexa_skill_kit.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def build_request(
    request_type: str = "IntentRequest",
    locale: str = "en-US",
    intent: str | None = "hello",
    slots: dict[str, Any] | None = None,
    attributes: dict[str, str] | None = None,
    new: bool = True,
    with_session: bool = True,
) -> dict[str, Any]:
    """Build a request envelope shaped like the ones Alexa sends."""
    request: dict[str, Any] = {
        "type": request_type,
        "requestId": "amzn1.echo-api.request.b8b49fde-4370-423f-bbb0-dc7305b788a0",
        "timestamp": "2018-12-03T00:33:58Z",
        "locale": locale,
    }
    if intent is not None:
        request["intent"] = {"name": intent, "confirmationStatus": "NONE"}
        if slots is not None:
            request["intent"]["slots"] = slots

    envelope: dict[str, Any] = {
        "version": "1.0",
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.myappid"},
                "user": {"userId": "amzn1.ask.account.theuserid"},
                "device": {
                    "deviceId": "amzn1.ask.device.superfakedevice",
                    "supportedInterfaces": {},
                },
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "53kr14t.k3y.d4t4-otherstuff",
            },
            "Viewport": {
                "experiences": [
                    {"arcMinuteWidth": 246, "arcMinuteHeight": 144, "canRotate": False, "canResize": False}
                ],
                "shape": "RECTANGLE",
                "pixelWidth": 1024,
                "pixelHeight": 600,
                "dpi": 160,
                "touch": ["SINGLE"],
            },
        },
        "request": request,
    }
    if with_session:
        envelope["session"] = {
            "new": new,
            "sessionId": "amzn1.echo-api.session.abc123",
            "application": {"applicationId": "amzn1.ask.skill.myappid"},
            "user": {"userId": "amzn1.ask.account.theuserid"},
        }
        if attributes is not None:
            envelope["session"]["attributes"] = attributes
    return envelope


@pytest.fixture
def make_request() -> Callable[..., dict[str, Any]]:
    return build_request


@pytest.fixture
def default_req() -> dict[str, Any]:
    return build_request(attributes={"lastSpeech": "Jupiter has the shortest day of all the planets"})


@pytest.fixture
def playback_req() -> dict[str, Any]:
    """A live playback request with redacted identifiers."""
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.SESSION",
            "application": {"applicationId": "amzn1.ask.skill.APP"},
            "attributes": {},
            "user": {"userId": "amzn1.ask.account.USER"},
        },
        "context": {
            "Viewports": [
                {
                    "type": "APL",
                    "id": "medHub",
                    "shape": "RECTANGLE",
                    "dpi": 160,
                    "presentationType": "OVERLAY",
                    "canRotate": False,
                }
            ],
            "AudioPlayer": {"playerActivity": "IDLE"},
            "Extensions": {"available": {"aplext:backstack:10": {}}},
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.APP"},
                "user": {"userId": "amzn1.ask.account.USER"},
                "device": {
                    "deviceId": "amzn1.ask.device.DEVICE",
                    "supportedInterfaces": {"AudioPlayer": {}},
                },
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "SECRET",
            },
        },
        "request": {
            "type": "IntentRequest",
            "requestId": "amzn1.echo-api.request.REQUEST",
            "locale": "en-US",
            "timestamp": "2025-03-17T23:27:29Z",
            "intent": {
                "name": "AMAZON.PlaybackAction<object@MusicCreativeWork>",
                "confirmationStatus": "NONE",
                "slots": {
                    "object.era": {"name": "object.era", "confirmationStatus": "NONE"},
                    "object.name": {
                        "name": "object.name",
                        "value": "in rainbows",
                        "confirmationStatus": "NONE",
                        "source": "USER",
                        "slotValue": {"type": "Simple", "value": "in rainbows"},
                    },
                    "object.byArtist.name": {"name": "object.byArtist.name", "confirmationStatus": "NONE"},
                    "object.type": {"name": "object.type", "confirmationStatus": "NONE"},
                },
            },
        },
    }
