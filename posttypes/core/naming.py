"""
Name derivation for post types and taxonomies.

A single short identifier ("book", "film_genre") expands into the four names
an entity needs:

    key       book        identifier the host registers the entity under
    singular  Book        human friendly singular label
    plural    Books       human friendly plural label
    slug      books       URL-safe rewrite slug

Any of singular / plural / slug can be supplied explicitly; only the missing
ones are computed.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidArgumentError, MissingFieldError

_WORD_START = re.compile(r"(^|\s)(\S)")

DERIVED_FIELDS = ("singular", "plural", "slug")


class NameSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    singular: str
    plural: str
    slug: str


NamesInput = Union[str, Mapping[str, Any], NameSet]


def pluralize(value: str) -> str:
    # Deliberately naive: "story" -> "stories", everything else gets an "s".
    if value.endswith("y"):
        return value[:-1] + "ies"
    return value + "s"


def humanize(key: str) -> str:
    text = key.replace("-", " ").replace("_", " ").lower()
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def slugify(key: str) -> str:
    return key.replace(" ", "-").replace("_", "-").lower()


def _default(field: str, key: str) -> str:
    if field == "singular":
        return humanize(key)
    if field == "plural":
        return pluralize(humanize(key))
    return pluralize(slugify(key))


def _extract_key(names: Mapping[str, Any]) -> str:
    key = names.get("key") or names.get("name")
    if key is None or key == "":
        raise MissingFieldError("names mapping must define a non-empty 'key' (or 'name')")
    if not isinstance(key, str):
        raise InvalidArgumentError(f"names key must be a string, got {type(key).__name__}")
    return key


def derive_names(identifier: NamesInput) -> NameSet:
    """Return the complete NameSet for a bare identifier or a partial mapping."""
    if isinstance(identifier, NameSet):
        return identifier

    if isinstance(identifier, str):
        if not identifier:
            raise InvalidArgumentError("entity identifier must be a non-empty string")
        supplied: Mapping[str, Any] = {}
        key = identifier
    elif isinstance(identifier, Mapping):
        supplied = identifier
        key = _extract_key(identifier)
    else:
        raise InvalidArgumentError(
            f"entity names must be a string or a mapping, got {type(identifier).__name__}"
        )

    values = {}
    for field in DERIVED_FIELDS:
        given = supplied.get(field)
        if given and not isinstance(given, str):
            raise InvalidArgumentError(f"names {field} must be a string, got {type(given).__name__}")
        if given:
            values[field] = given
        else:
            values[field] = _default(field, key)

    return NameSet(key=key, **values)


def sanitize_title(value: Any) -> str:
    """Normalize a request value into the slug shape used by filter dropdowns."""
    text = re.sub(r"[^\w\s-]", "", str(value)).strip().lower()
    return re.sub(r"[\s_]+", "-", text)
