"""Display interface structures.

The Display interface itself is deprecated, but its image structures are
still used by the AudioPlayer interface for album art and backgrounds.
"""

from enum import auto

from pydantic import Field

from ..enums import UpperSnakeApiEnum
from .base import AlexaModel


class ImageSize(UpperSnakeApiEnum):
    """Named image sizes (``X_SMALL`` ... ``X_LARGE``)."""

    XSmall = auto()
    Small = auto()
    Medium = auto()
    Large = auto()
    XLarge = auto()


class ImageInstance(AlexaModel):
    """One rendition of an image."""

    url: str
    size: ImageSize | None = None
    # Alexa's size chart tops out well below 2**16 pixels.
    width_pixels: int | None = Field(None, ge=0, le=65535)
    height_pixels: int | None = Field(None, ge=0, le=65535)


class Image(AlexaModel):
    """An image with one or more sized sources."""

    content_description: str | None = None
    sources: list[ImageInstance]

    @classmethod
    def from_url(cls, url: str, content_description: str | None = None) -> "Image":
        return cls(content_description=content_description, sources=[ImageInstance(url=url)])
