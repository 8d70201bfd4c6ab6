"""Alexa Skill request models."""

from enum import auto

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_pascal

from ..enums import ApiEnum, UpperSnakeApiEnum
from .base import AlexaModel
from .locale import Locale, LocaleField

# Authority status code for a slot value that matched the slot type.
RESOLUTION_MATCH = "ER_SUCCESS_MATCH"


class RequestType(ApiEnum):
    """Alexa request types. Others decode to ``RequestType.Other``."""

    LaunchRequest = auto()
    IntentRequest = auto()
    SessionEndedRequest = auto()
    CanFulfillIntentRequest = auto()


class IntentName(ApiEnum):
    """Built-in Amazon intents. Custom intents decode to ``IntentName.Other``."""

    Help = "AMAZON.HelpIntent"
    Cancel = "AMAZON.CancelIntent"
    Fallback = "AMAZON.FallbackIntent"
    LoopOff = "AMAZON.LoopOffIntent"
    LoopOn = "AMAZON.LoopOnIntent"
    NavigateHome = "AMAZON.NavigateHomeIntent"
    Next = "AMAZON.NextIntent"
    No = "AMAZON.NoIntent"
    Pause = "AMAZON.PauseIntent"
    Previous = "AMAZON.PreviousIntent"
    Repeat = "AMAZON.RepeatIntent"
    Resume = "AMAZON.ResumeIntent"
    Select = "AMAZON.SelectIntent"
    ShuffleOff = "AMAZON.ShuffleOffIntent"
    ShuffleOn = "AMAZON.ShuffleOnIntent"
    StartOver = "AMAZON.StartOverIntent"
    Stop = "AMAZON.StopIntent"
    Yes = "AMAZON.YesIntent"


class DialogState(UpperSnakeApiEnum):
    Started = auto()
    InProgress = auto()
    Completed = auto()


class SessionEndedReason(UpperSnakeApiEnum):
    UserInitiated = auto()
    Error = auto()
    ExceededMaxReprompts = auto()


class PlayerActivity(UpperSnakeApiEnum):
    Idle = auto()
    Paused = auto()
    Playing = auto()
    BufferUnderrun = auto()
    Finished = auto()
    Stopped = auto()


class Application(AlexaModel):
    application_id: str


class User(AlexaModel):
    user_id: str
    access_token: str | None = None


class Device(AlexaModel):
    device_id: str


class Session(AlexaModel):
    """Alexa session information."""

    new: bool
    session_id: str
    attributes: dict[str, str] | None = None
    application: Application
    user: User


class Status(AlexaModel):
    code: str


class ResolutionValue(AlexaModel):
    name: str
    id: str


class ValueWrapper(AlexaModel):
    value: ResolutionValue


class ResolutionsPerAuthority(AlexaModel):
    """Candidate values from one authority (slot type or dynamic entities)."""

    authority: str
    status: Status
    values: list[ValueWrapper] = Field(default_factory=list)


class Resolution(AlexaModel):
    """Entity resolution results for a slot."""

    resolutions_per_authority: list[ResolutionsPerAuthority]


class Slot(AlexaModel):
    """Alexa slot value."""

    name: str
    value: str | None = None
    confirmation_status: str | None = None
    resolutions: Resolution | None = None

    def resolved_values(self) -> list[str]:
        """Names of the matched resolution candidates, best match first."""
        if self.resolutions is None:
            return []
        return [
            wrapper.value.name
            for authority in self.resolutions.resolutions_per_authority
            if authority.status.code == RESOLUTION_MATCH
            for wrapper in authority.values
        ]


class Intent(AlexaModel):
    """Alexa intent with slots."""

    name: IntentName
    confirmation_status: str | None = None
    slots: dict[str, Slot] | None = None

    def get_slot(self, name: str) -> Slot | None:
        if self.slots is None:
            return None
        return self.slots.get(name)


class Request(AlexaModel):
    """Alexa request payload."""

    request_type: RequestType = Field(alias="type")
    request_id: str
    timestamp: str
    locale: LocaleField
    intent: Intent | None = None
    reason: SessionEndedReason | None = None
    dialog_state: DialogState | None = None


class System(AlexaModel):
    api_access_token: str | None = None
    api_endpoint: str | None = None
    device: Device | None = None
    application: Application | None = None
    user: User | None = None


class AudioPlayerState(AlexaModel):
    """Playback state reported in the request context."""

    token: str | None = None
    offset_in_milliseconds: int | None = None
    player_activity: PlayerActivity | None = None


class Context(AlexaModel):
    """Request context. Its top-level keys are capitalized (``System``, ``AudioPlayer``)."""

    model_config = ConfigDict(alias_generator=to_pascal)

    system: System
    audio_player: AudioPlayerState | None = None


class RequestEnvelope(AlexaModel):
    """Full Alexa request envelope."""

    version: str
    session: Session | None = None
    request: Request
    context: Context

    def request_type(self) -> RequestType:
        return self.request.request_type

    def locale(self) -> Locale:
        return self.request.locale

    def intent_type(self) -> IntentName | None:
        """The intent name, or ``None`` for requests without an intent."""
        if self.request.intent is None:
            return None
        return self.request.intent.name

    def slot_value(self, name: str) -> str | None:
        """Value of the named slot, if the intent has it and it was filled."""
        if self.request.intent is None:
            return None
        slot = self.request.intent.get_slot(name)
        if slot is None:
            return None
        return slot.value

    def attribute_value(self, key: str) -> str | None:
        """Session attribute carried over from a previous response."""
        if self.session is None or self.session.attributes is None:
            return None
        return self.session.attributes.get(key)

    def is_new(self) -> bool:
        return self.session is not None and self.session.new
