"""Exception types for alexa-skill-kit."""

from typing import Any

from pydantic import ValidationError


class AlexaSkillKitError(Exception):
    """Base exception for alexa-skill-kit."""


class EnvelopeDecodeError(AlexaSkillKitError, ValueError):
    """Raised when an envelope is structurally invalid and cannot be decoded."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "EnvelopeDecodeError":
        errors = exc.errors(include_url=False)
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        message = f"Invalid request envelope: {location}: {first['msg']}"
        if len(errors) > 1:
            message += f" (and {len(errors) - 1} more)"
        return cls(message, errors)
