"""Response directives, discriminated by their ``type`` field."""

import logging
from typing import Annotated, Any, Union

from pydantic import Discriminator, RootModel, Tag, ValidationError, ValidatorFunctionWrapHandler, WrapValidator

from .audioplayer import PlayDirective, StopDirective

logger = logging.getLogger(__name__)

OPAQUE = "opaque"

KNOWN_DIRECTIVES = {"AudioPlayer.Play", "AudioPlayer.Stop"}


class OpaqueDirective(RootModel[Any]):
    """A directive this library does not model, kept exactly as received."""

    @property
    def directive_type(self) -> str | None:
        if isinstance(self.root, dict):
            return self.root.get("type")
        return None


def _directive_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        # Model instances: OpaqueDirective has no ``type`` attribute.
        kind = getattr(value, "type", None)
    if isinstance(kind, str) and kind in KNOWN_DIRECTIVES:
        return kind
    return OPAQUE


def _keep_as_opaque(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Fall back to the opaque arm when a recognized type has a payload we cannot read."""
    try:
        return handler(value)
    except ValidationError as e:
        logger.debug(f"Keeping directive as opaque: {e.error_count()} validation error(s)")
        return OpaqueDirective(value)


_TaggedDirective = Annotated[
    Union[
        Annotated[PlayDirective, Tag("AudioPlayer.Play")],
        Annotated[StopDirective, Tag("AudioPlayer.Stop")],
        Annotated[OpaqueDirective, Tag(OPAQUE)],
    ],
    Discriminator(_directive_tag),
]

Directive = Annotated[_TaggedDirective, WrapValidator(_keep_as_opaque)]
