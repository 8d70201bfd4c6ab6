"""Alexa locales, decomposed into language and region."""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from ..enums import ApiEnum


class Language(ApiEnum):
    """ISO 639-1 language codes used by Alexa locales."""

    Arabic = "ar"
    German = "de"
    English = "en"
    Spanish = "es"
    French = "fr"
    Hindi = "hi"
    Italian = "it"
    Japanese = "ja"
    Portuguese = "pt"


class Region(ApiEnum):
    """ISO 3166 region codes used by Alexa locales."""

    Australia = "AU"
    Brazil = "BR"
    Canada = "CA"
    Germany = "DE"
    Spain = "ES"
    France = "FR"
    UnitedKingdom = "GB"
    India = "IN"
    Italy = "IT"
    Japan = "JP"
    Mexico = "MX"
    SaudiArabia = "SA"
    UnitedStates = "US"


@dataclass(frozen=True)
class Locale:
    """A ``language[-region]`` locale such as ``en-US``.

    Supports ``match`` on its parts:

        match locale:
            case Locale(Language.English, Region.Australia):
                ...
    """

    language: Language
    region: Region | None = None

    @classmethod
    def parse(cls, value: str) -> "Locale":
        """
        Split ``value`` on its first hyphen.

        Anything after the first hyphen is the region, so ``"en-US-x"``
        keeps ``"US-x"`` as an unknown region and still formats back to the
        original string.
        """
        language, sep, region = value.partition("-")
        return cls(
            language=Language.decode(language),
            region=Region.decode(region) if sep else None,
        )

    def format(self) -> str:
        if self.region is None:
            return self.language.encode()
        return f"{self.language.encode()}-{self.region.encode()}"

    def parts(self) -> tuple[Language, Region | None]:
        return self.language, self.region

    def is_english(self) -> bool:
        return self.language == Language.English

    def is_french(self) -> bool:
        return self.language == Language.French

    def is_spanish(self) -> bool:
        return self.language == Language.Spanish

    def __str__(self) -> str:
        return self.format()


def _validate_locale(value: Any) -> Locale:
    if isinstance(value, Locale):
        return value
    if isinstance(value, str):
        return Locale.parse(value)
    raise ValueError(f"locale must be a string, got {type(value).__name__}")


# Locale carried on the wire as its delimited string form.
LocaleField = Annotated[
    Locale,
    PlainValidator(_validate_locale),
    PlainSerializer(lambda locale: locale.format(), return_type=str),
    WithJsonSchema({"type": "string", "examples": ["en-US"]}),
]
