"""
Serialization of option bags into Câmara query strings.

Each operation declares which option keys it accepts and the kind of value each
one carries; ``build_url`` validates the caller's options against that schema and
appends one ``key=value`` fragment per value, in the order the options were given.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import quote

from .exceptions import TypeMismatchError, UnknownOptionError
from .validators import validate_date, validate_id, validate_time

logger = logging.getLogger(__name__)


class OptionKind(str, Enum):
    INTEGER = "integer"
    INTEGER_LIST = "integer-list"
    STRING = "string"
    STRING_LIST = "string-list"
    DATE = "date"
    TIME = "time"
    BOOLEAN = "boolean"


Schema = Mapping[str, OptionKind]


def _quote(value: str) -> str:
    # ':' and '-' stay readable so dates and times keep their wire format
    return quote(value, safe=":-")


def _list_values(key: str, value: Any, expected: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            f"got {type(value).__name__}", option=key, expected=expected
        )
    return list(value)


def _encode_integer_list(key: str, value: Any) -> List[str]:
    return [str(validate_id(v)) for v in _list_values(key, value, "a list of integers")]


def _encode_string_list(key: str, value: Any) -> List[str]:
    out = []
    for item in _list_values(key, value, "a list of strings"):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning(f"Skipping non-string value {item!r} in option '{key}'.")
    return out


def _encode_string(key: str, value: Any) -> List[str]:
    if not isinstance(value, str):
        raise TypeMismatchError(f"got {type(value).__name__}", option=key, expected="a string")
    return [value]


def _encode_boolean(key: str, value: Any) -> List[str]:
    if not isinstance(value, bool):
        raise TypeMismatchError(f"got {type(value).__name__}", option=key, expected="a boolean")
    return ["true" if value else "false"]


_ENCODERS: Dict[OptionKind, Callable[[str, Any], List[str]]] = {
    OptionKind.INTEGER_LIST: _encode_integer_list,
    OptionKind.STRING_LIST: _encode_string_list,
    OptionKind.DATE: lambda key, value: [validate_date(value)],
    OptionKind.TIME: lambda key, value: [validate_time(value)],
    OptionKind.BOOLEAN: _encode_boolean,
    OptionKind.STRING: _encode_string,
    OptionKind.INTEGER: lambda key, value: [str(validate_id(value))],
}


def encode_options(options: Optional[Mapping[str, Any]], schema: Schema) -> List[str]:
    """Return the ``key=value`` fragments for ``options``, validated against ``schema``."""
    fragments: List[str] = []
    for key, value in (options or {}).items():
        kind = schema.get(key)
        if kind is None:
            accepted = ", ".join(schema) or "none"
            raise UnknownOptionError(f"accepted options: {accepted}", option=key)
        for encoded in _ENCODERS[kind](key, value):
            fragments.append(f"{key}={_quote(encoded)}")
    return fragments


def build_url(base_url: str, options: Optional[Mapping[str, Any]], schema: Schema) -> str:
    """
    Append the encoded ``options`` to ``base_url``.

    ``base_url`` is returned unchanged when there are no options. Fragments are
    joined with ``&``; the first one is introduced with ``?`` when ``base_url`` has
    no query string yet.

    Raises:
        UnknownOptionError: a key is not part of ``schema``.
        TypeMismatchError: a value does not have the shape its kind requires.
        InvalidInputError: a date, time or integer value is malformed.
    """
    fragments = encode_options(options, schema)
    if not fragments:
        return base_url

    url = base_url
    for fragment in fragments:
        url += ("&" if "?" in url else "?") + fragment
    return url
