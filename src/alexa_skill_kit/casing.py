"""Casing conventions used to derive wire strings from enum member names.

Member names are written in the protocol's own PascalCase vocabulary
(``ReplaceAll``, ``XSmall``). Each convention maps such a name onto the
string the Alexa JSON schema expects.
"""

from pydantic.alias_generators import to_camel, to_snake


def identity(name: str) -> str:
    """Leave the declared name unchanged (``LaunchRequest`` -> ``LaunchRequest``)."""
    return name


def lower_camel(name: str) -> str:
    """``ReplaceAll`` -> ``replaceAll``, ``XSmall`` -> ``xSmall``."""
    return to_camel(to_snake(name))


def upper_snake(name: str) -> str:
    """``ReplaceAll`` -> ``REPLACE_ALL``, ``XSmall`` -> ``X_SMALL``."""
    return to_snake(name).upper()
