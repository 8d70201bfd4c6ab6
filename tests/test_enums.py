"""Tests for open enumerations."""

import json
from enum import auto

import pytest
from pydantic import BaseModel, ValidationError

from alexa_skill_kit.enums import ApiEnum, CamelCaseApiEnum, UpperSnakeApiEnum
from alexa_skill_kit.models.audioplayer import PlayBehavior
from alexa_skill_kit.models.display import ImageSize
from alexa_skill_kit.models.locale import Language, Region
from alexa_skill_kit.models.request import IntentName, RequestType
from alexa_skill_kit.models.response import CardType, SpeechType, Version


class Shape(CamelCaseApiEnum):
    RoundRect = auto()
    Circle = auto()


class Holder(BaseModel):
    card: CardType
    behavior: PlayBehavior | None = None


ALL_ENUMS = [RequestType, IntentName, CardType, SpeechType, PlayBehavior, ImageSize, Language, Region, Version, Shape]


def test_identity_convention() -> None:
    """Test identity members use their declared name."""
    assert RequestType.LaunchRequest.value == "LaunchRequest"
    assert CardType.AskForPermissionsConsent.value == "AskForPermissionsConsent"


def test_upper_snake_convention() -> None:
    """Test upper snake members."""
    assert PlayBehavior.ReplaceAll.value == "REPLACE_ALL"
    assert PlayBehavior.ReplaceEnqueued.value == "REPLACE_ENQUEUED"
    assert ImageSize.XSmall.value == "X_SMALL"


def test_camel_case_convention() -> None:
    """Test lower camel case members."""
    assert Shape.RoundRect.value == "roundRect"
    assert Shape.decode("circle") == Shape.Circle


def test_explicit_mapping() -> None:
    """Test explicitly mapped members bypass the convention."""
    assert SpeechType.SSML.value == "SSML"
    assert SpeechType.PlainText.value == "PlainText"
    assert IntentName.Help.value == "AMAZON.HelpIntent"
    assert Language.English.value == "en"
    assert Version.V1_0.value == "1.0"


@pytest.mark.parametrize("enum_type", ALL_ENUMS)
def test_known_values_round_trip(enum_type: type[ApiEnum]) -> None:
    """Test decode(encode(k)) == k for every known member."""
    for member in enum_type:
        decoded = enum_type.decode(member.encode())
        assert decoded is member
        assert decoded.is_known


@pytest.mark.parametrize("enum_type", ALL_ENUMS)
def test_wire_strings_are_unique(enum_type: type[ApiEnum]) -> None:
    """Test no two members share a wire string."""
    values = [member.value for member in enum_type.__members__.values()]
    assert len(values) == len(set(values))


@pytest.mark.parametrize("raw", ["FooBar", "", "  ", "simple", "AMAZON.Foo<bar@Baz>"])
def test_unknown_values_are_preserved(raw: str) -> None:
    """Test unknown strings decode to the Other carrier and encode back verbatim."""
    value = CardType.decode(raw)

    assert not value.is_known
    assert value.name == "Other"
    assert value == CardType.other(raw)
    assert value.encode() == raw
    assert CardType.decode(value.encode()) == value


def test_unknown_values_compare_by_string() -> None:
    """Test two unknowns are equal only when their strings match."""
    assert PlayBehavior.decode("FOO_BAR") == PlayBehavior.decode("FOO_BAR")
    assert PlayBehavior.decode("FOO_BAR") != PlayBehavior.decode("FOO_BAZ")
    assert PlayBehavior.decode("FOO_BAR") != PlayBehavior.ReplaceAll


def test_values_of_different_enums_never_compare_equal() -> None:
    """Test equality is scoped to one enumeration."""
    assert Language.other("x") != Region.other("x")
    assert hash(Language.other("x")) != hash(Region.other("x"))
    assert len({Language.other("x"), Region.other("x")}) == 2


def test_values_do_not_equal_bare_strings() -> None:
    """Test a value is not interchangeable with its wire string."""
    assert IntentName.decode("hello") != "hello"
    assert "hello" != IntentName.decode("hello")
    assert not (IntentName.decode("hello") == "hello")
    assert IntentName.Help != "AMAZON.HelpIntent"
    assert IntentName.Help.encode() == "AMAZON.HelpIntent"


def test_equal_values_share_a_hash() -> None:
    """Test equal values collapse to one set element."""
    assert hash(CardType.other("FooBar")) == hash(CardType.decode("FooBar"))
    assert {CardType.decode("FooBar"), CardType.other("FooBar"), CardType.Simple, CardType.decode("Simple")} == {
        CardType.other("FooBar"),
        CardType.Simple,
    }


def test_unknown_values_are_not_registered() -> None:
    """Test decoding arbitrary input does not add members."""
    before = len(CardType)
    CardType.decode("SomethingNew")

    assert len(CardType) == before
    assert "SomethingNew" not in CardType._value2member_map_


def test_non_string_does_not_decode() -> None:
    """Test non-string input is rejected rather than carried."""
    with pytest.raises(ValueError):
        CardType(42)


def test_pydantic_decodes_known_and_unknown() -> None:
    """Test enum fields accept any wire string inside models."""
    holder = Holder.model_validate_json('{"card": "LinkAccount", "behavior": "REPLACE_ALL"}')
    assert holder.card is CardType.LinkAccount
    assert holder.behavior is PlayBehavior.ReplaceAll

    holder = Holder.model_validate_json('{"card": "FooBar", "behavior": "FOO_BAR"}')
    assert holder.card == CardType.other("FooBar")
    assert not holder.card.is_known
    assert holder.behavior == PlayBehavior.other("FOO_BAR")


def test_pydantic_encodes_wire_strings() -> None:
    """Test enum fields serialize to their wire string."""
    holder = Holder(card=CardType.other("FooBar"), behavior=PlayBehavior.ReplaceAll)

    assert json.loads(holder.model_dump_json()) == {"card": "FooBar", "behavior": "REPLACE_ALL"}


def test_pydantic_rejects_non_string() -> None:
    """Test a mistyped enum field is a validation error."""
    with pytest.raises(ValidationError):
        Holder.model_validate({"card": 7})


def test_match_on_members() -> None:
    """Test members work as value patterns."""

    def describe(behavior: PlayBehavior) -> str:
        match behavior:
            case PlayBehavior.Enqueue:
                return "enqueue"
            case PlayBehavior.ReplaceAll:
                return "replace"
            case _:
                return f"other:{behavior.value}"

    assert describe(PlayBehavior.decode("ENQUEUE")) == "enqueue"
    assert describe(PlayBehavior.decode("REPLACE_ALL")) == "replace"
    assert describe(PlayBehavior.decode("SHUFFLE")) == "other:SHUFFLE"


def test_upper_snake_base_is_usable_directly() -> None:
    """Test new enums can opt into a convention by subclassing."""

    class Mode(UpperSnakeApiEnum):
        DriveMode = auto()

    assert Mode.DriveMode.value == "DRIVE_MODE"
    assert Mode.decode("WALK_MODE").value == "WALK_MODE"
