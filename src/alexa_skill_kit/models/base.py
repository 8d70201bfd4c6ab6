"""Shared base for Alexa wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class AlexaModel(BaseModel):
    """
    Base for every Alexa JSON structure.

    Attributes are snake_case in Python and camelCase on the wire. Optional
    fields left as ``None`` are omitted from serialized output instead of
    being written as ``null``. Unknown wire fields are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def serialize_present_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}

    def to_dict(self) -> dict[str, Any]:
        """Wire representation as a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Wire representation as a JSON string."""
        return self.model_dump_json(by_alias=True)
