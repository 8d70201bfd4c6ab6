"""Pydantic models for the Alexa Skills Kit JSON protocol."""

from .audioplayer import (
    AudioItem,
    AudioItemMetadata,
    CaptionData,
    PlayBehavior,
    PlayDirective,
    StopDirective,
    Stream,
)
from .base import AlexaModel
from .directives import Directive, OpaqueDirective
from .display import Image, ImageInstance, ImageSize
from .locale import Language, Locale, LocaleField, Region
from .request import (
    Context,
    DialogState,
    Intent,
    IntentName,
    PlayerActivity,
    Request,
    RequestEnvelope,
    RequestType,
    Resolution,
    Session,
    SessionEndedReason,
    Slot,
)
from .response import (
    Card,
    CardImage,
    CardType,
    Reprompt,
    Response,
    ResponseEnvelope,
    Speech,
    SpeechType,
    Version,
)

__all__ = [
    "AlexaModel",
    "RequestEnvelope",
    "Request",
    "RequestType",
    "Session",
    "Context",
    "Intent",
    "IntentName",
    "Slot",
    "Resolution",
    "DialogState",
    "SessionEndedReason",
    "PlayerActivity",
    "Locale",
    "LocaleField",
    "Language",
    "Region",
    "ResponseEnvelope",
    "Response",
    "Version",
    "Speech",
    "SpeechType",
    "Card",
    "CardType",
    "CardImage",
    "Reprompt",
    "Directive",
    "OpaqueDirective",
    "PlayDirective",
    "StopDirective",
    "PlayBehavior",
    "AudioItem",
    "AudioItemMetadata",
    "Stream",
    "CaptionData",
    "Image",
    "ImageInstance",
    "ImageSize",
]
