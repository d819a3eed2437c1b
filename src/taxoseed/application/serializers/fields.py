"""Typed field readers shared by the definition serializers.

Errors name the failing field by its path inside the originating definition
(``values[2].name``) and carry that definition's identifier.
"""

from collections.abc import Mapping
from typing import Any

from taxoseed.domain.exceptions import (
    MissingField,
    MissingIdentifier,
    TypeMismatch,
    UnknownField,
)


def is_int(value: object) -> bool:
    # bool is an int subclass but never a valid identifier
    return isinstance(value, int) and not isinstance(value, bool)


def require_mapping(raw: object, name: str, identifier: object = None) -> Mapping[str, Any]:
    """Return raw as a mapping or raise TypeMismatch."""
    if not isinstance(raw, Mapping):
        raise TypeMismatch(name, "a mapping", raw, identifier)
    return raw


def reject_unknown_keys(
    raw: Mapping[str, Any],
    allowed: frozenset[str],
    identifier: object,
    *,
    prefix: str = "",
) -> None:
    """Raise UnknownField for the first key outside the schema."""
    for key in raw:
        if key not in allowed:
            raise UnknownField(f"{prefix}{key}", identifier)


def read_int_id(raw: Mapping[str, Any], kind: str) -> int:
    value = raw.get("id")
    if value is None:
        raise MissingIdentifier(kind)
    if not is_int(value):
        raise TypeMismatch("id", "an integer", value)
    return value


def read_str_id(raw: Mapping[str, Any], kind: str) -> str:
    value = raw.get("id")
    if value is None:
        raise MissingIdentifier(kind)
    if not isinstance(value, str) or not value:
        raise TypeMismatch("id", "a non-empty string", value)
    return value


def read_int(raw: Mapping[str, Any], name: str, identifier: object, *, prefix: str = "") -> int:
    path = prefix + name
    if name not in raw:
        raise MissingField(path, identifier)
    value = raw[name]
    if not is_int(value):
        raise TypeMismatch(path, "an integer", value, identifier)
    return value


def read_str(
    raw: Mapping[str, Any],
    name: str,
    identifier: object,
    *,
    required: bool = True,
    prefix: str = "",
) -> str | None:
    """Read a string field.

    Required fields must be present and non-null; optional fields yield None
    when absent or null.
    """
    if name not in raw:
        if required:
            raise MissingField(prefix + name, identifier)
        return None
    value = raw[name]
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise TypeMismatch(prefix + name, "a string", value, identifier)
    return value


def read_list(raw: Mapping[str, Any], name: str, identifier: object) -> list[Any]:
    """Read an optional list field; absent or null yields an empty list."""
    value = raw.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeMismatch(name, "a list", value, identifier)
    return value


def read_int_list(raw: Mapping[str, Any], name: str, identifier: object) -> tuple[int, ...]:
    items = read_list(raw, name, identifier)
    for i, item in enumerate(items):
        if not is_int(item):
            raise TypeMismatch(f"{name}[{i}]", "an integer", item, identifier)
    return tuple(items)
