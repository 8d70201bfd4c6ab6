"""AudioPlayer interface structures and directives."""

from enum import auto
from typing import Literal

from pydantic import Field

from ..enums import UpperSnakeApiEnum
from .base import AlexaModel
from .display import Image


class PlayBehavior(UpperSnakeApiEnum):
    """How a play directive or speech interacts with the current queue."""

    Enqueue = auto()
    ReplaceAll = auto()
    ReplaceEnqueued = auto()


class CaptionData(AlexaModel):
    """Caption track for a stream."""

    data_type: str | None = Field(None, alias="type")
    content: str | None = None


class Stream(AlexaModel):
    """Audio stream to play."""

    url: str
    token: str
    # Should be non-negative, but Alexa has been observed to send -1.
    offset_in_milliseconds: int
    expected_previous_token: str | None = None
    caption_data: CaptionData | None = None


class AudioItemMetadata(AlexaModel):
    """Metadata displayed on screen devices while audio plays."""

    title: str | None = None
    subtitle: str | None = None
    art: Image | None = None
    background_image: Image | None = None


class AudioItem(AlexaModel):
    """Stream plus optional display metadata."""

    stream: Stream
    metadata: AudioItemMetadata | None = None


class PlayDirective(AlexaModel):
    """``AudioPlayer.Play`` directive."""

    type: Literal["AudioPlayer.Play"] = "AudioPlayer.Play"
    play_behavior: PlayBehavior
    audio_item: AudioItem

    @classmethod
    def for_stream(
        cls,
        url: str,
        token: str,
        play_behavior: PlayBehavior = PlayBehavior.ReplaceAll,
        offset_in_milliseconds: int = 0,
        metadata: AudioItemMetadata | None = None,
    ) -> "PlayDirective":
        """Build a play directive for a single stream URL."""
        return cls(
            play_behavior=play_behavior,
            audio_item=AudioItem(
                stream=Stream(url=url, token=token, offset_in_milliseconds=offset_in_milliseconds),
                metadata=metadata,
            ),
        )


class StopDirective(AlexaModel):
    """``AudioPlayer.Stop`` directive."""

    type: Literal["AudioPlayer.Stop"] = "AudioPlayer.Stop"
