"""Open enumerations for Alexa protocol string constants.

The Alexa schema keeps adding values to its string enumerations, so every
enum declared here accepts any string. Values outside the declared set
decode to an ``Other`` pseudo-member carrying the raw wire string, and
encode back to that same string.

Three base classes pick the casing convention used for ``auto()`` members:

    class RequestType(ApiEnum):
        LaunchRequest = auto()              # "LaunchRequest"

    class PlayBehavior(UpperSnakeApiEnum):
        ReplaceAll = auto()                 # "REPLACE_ALL"

Members may also be given an explicit wire string, bypassing the
convention:

    class Language(ApiEnum):
        English = "en"
"""

from enum import Enum
from typing import TypeVar

from . import casing

E = TypeVar("E", bound="ApiEnum")

OTHER = "Other"


class ApiEnum(str, Enum):
    """String enum that never rejects a wire value.

    ``auto()`` members use their declared name verbatim as the wire string.
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list) -> str:
        return casing.identity(name)

    @classmethod
    def _missing_(cls, value: object) -> "ApiEnum | None":
        if not isinstance(value, str):
            return None
        return cls.other(value)

    @classmethod
    def other(cls: type[E], value: str) -> E:
        """Build the unknown carrier for ``value``.

        Pseudo-members are not registered on the class, so arbitrary input
        does not grow the member tables. ``value`` must not be one of the
        declared wire strings.
        """
        member = str.__new__(cls, value)
        member._name_ = OTHER
        member._value_ = value
        return member

    @classmethod
    def decode(cls: type[E], value: str) -> E:
        """Map a wire string to its member, or to an ``Other`` carrier."""
        return cls(value)

    def encode(self) -> str:
        """Return the wire string."""
        return self._value_

    @property
    def is_known(self) -> bool:
        return type(self)._value2member_map_.get(self._value_) is self

    # Values of different enumerations never compare equal, and neither do
    # a value and its bare wire string.
    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._value_ == other._value_

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((type(self), self._value_))


class CamelCaseApiEnum(ApiEnum):
    """``auto()`` members are written in lower camel case."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list) -> str:
        return casing.lower_camel(name)


class UpperSnakeApiEnum(ApiEnum):
    """``auto()`` members are written in upper snake case."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list) -> str:
        return casing.upper_snake(name)
