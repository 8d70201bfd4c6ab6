"""Alexa Skill response models and builders."""

from enum import auto

from pydantic import Field

from ..enums import ApiEnum
from .audioplayer import PlayBehavior
from .base import AlexaModel
from .directives import Directive


class Version(ApiEnum):
    V1_0 = "1.0"


class SpeechType(ApiEnum):
    PlainText = "PlainText"
    SSML = "SSML"


class CardType(ApiEnum):
    Simple = auto()
    Standard = auto()
    LinkAccount = auto()
    AskForPermissionsConsent = auto()


class Speech(AlexaModel):
    """Alexa speech output."""

    speech_type: SpeechType = Field(alias="type")
    text: str | None = None
    ssml: str | None = None
    play_behavior: PlayBehavior | None = None

    @classmethod
    def plain(cls, text: str) -> "Speech":
        """Plain text output speech."""
        return cls(speech_type=SpeechType.PlainText, text=text)

    @classmethod
    def from_ssml(cls, ssml: str) -> "Speech":
        """SSML output speech; ``ssml`` must include the ``<speak>`` wrapper."""
        return cls(speech_type=SpeechType.SSML, ssml=ssml)

    def with_play_behavior(self, behavior: PlayBehavior) -> "Speech":
        self.play_behavior = behavior
        return self


class CardImage(AlexaModel):
    """Images for a standard card."""

    small_image_url: str | None = None
    large_image_url: str | None = None

    def with_small_image_url(self, url: str) -> "CardImage":
        self.small_image_url = url
        return self

    def with_large_image_url(self, url: str) -> "CardImage":
        self.large_image_url = url
        return self


class Card(AlexaModel):
    """Alexa card for visual display."""

    card_type: CardType = Field(alias="type")
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: CardImage | None = None
    permissions: list[str] | None = None

    @classmethod
    def simple(cls, title: str, content: str) -> "Card":
        return cls(card_type=CardType.Simple, title=title, content=content)

    @classmethod
    def standard(cls, title: str, text: str, image: CardImage) -> "Card":
        # Standard cards carry their body in ``text``, not ``content``.
        return cls(card_type=CardType.Standard, title=title, text=text, image=image)

    @classmethod
    def link_account(cls) -> "Card":
        return cls(card_type=CardType.LinkAccount)

    @classmethod
    def ask_for_permission(cls, permissions: list[str]) -> "Card":
        return cls(card_type=CardType.AskForPermissionsConsent, permissions=permissions)


class Reprompt(AlexaModel):
    output_speech: Speech


class Response(AlexaModel):
    """Alexa response body."""

    output_speech: Speech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    should_end_session: bool
    directives: list[Directive] | None = None


class ResponseEnvelope(AlexaModel):
    """Full Alexa response envelope."""

    version: Version = Version.V1_0
    session_attributes: dict[str, str] | None = None
    response: Response

    @classmethod
    def new(cls, should_end: bool) -> "ResponseEnvelope":
        """Response with only the required elements."""
        return cls(response=Response(should_end_session=should_end))

    @classmethod
    def simple(cls, title: str, text: str) -> "ResponseEnvelope":
        """Plain speech with a matching simple card, ending the session."""
        return cls.new(True).with_card(Card.simple(title, text)).with_speech(Speech.plain(text))

    @classmethod
    def new_simple(cls, title: str, text: str) -> "ResponseEnvelope":
        return cls.simple(title, text)

    @classmethod
    def end(cls) -> "ResponseEnvelope":
        """Empty response ending the session."""
        return cls.new(True)

    def with_speech(self, speech: Speech) -> "ResponseEnvelope":
        self.response.output_speech = speech
        return self

    def with_card(self, card: Card) -> "ResponseEnvelope":
        self.response.card = card
        return self

    def with_reprompt(self, speech: Speech) -> "ResponseEnvelope":
        self.response.reprompt = Reprompt(output_speech=speech)
        return self

    def with_directive(self, directive: Directive) -> "ResponseEnvelope":
        if self.response.directives is None:
            self.response.directives = []
        self.response.directives.append(directive)
        return self

    def add_attribute(self, key: str, value: str) -> None:
        """
        Set a session attribute, replacing any previous value for ``key``.

        Attributes come back on the next request of the same session.
        """
        if self.session_attributes is None:
            self.session_attributes = {}
        self.session_attributes[key] = value
