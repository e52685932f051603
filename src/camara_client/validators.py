"""
Validation of the primitive values that end up in Câmara query strings and paths.

Dates travel as ``AAAA-MM-DD`` and times as ``HH:MM``; both formats are part of the
upstream contract. Calendar objects are accepted and converted explicitly.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Union

from .exceptions import InvalidInputError

DateLike = Union[str, date, datetime]
TimeLike = Union[str, time, datetime]

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def validate_date(value: DateLike) -> str:
    """
    Return ``value`` as an ``AAAA-MM-DD`` string.

    Strings must already be in canonical form; ``date``/``datetime`` objects are
    formatted from their own year, month and day. The day is only checked against
    the literal upper bound 31, not against the length of the month.

    Raises:
        InvalidInputError: on a malformed string, an out-of-range month or day, or
            an unsupported type.
    """
    if isinstance(value, (date, datetime)):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"

    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise InvalidInputError(f"{value!r} is not a valid date (expected AAAA-MM-DD).", value=value)

    _, month, day = (int(part) for part in value.split("-"))
    if not 1 <= month <= 12:
        raise InvalidInputError(f"{value!r} has an invalid month.", value=value)
    if not 1 <= day <= 31:
        raise InvalidInputError(f"{value!r} has an invalid day.", value=value)
    return value


def validate_time(value: TimeLike) -> str:
    """Return ``value`` as an ``HH:MM`` string (hour up to 24, minute up to 59)."""
    if isinstance(value, (time, datetime)):
        return f"{value.hour:02d}:{value.minute:02d}"

    if not isinstance(value, str) or not _TIME_RE.fullmatch(value):
        raise InvalidInputError(f"{value!r} is not a valid time (expected HH:MM).", value=value)

    hour, minute = (int(part) for part in value.split(":"))
    if hour > 24:
        raise InvalidInputError(f"{value!r} has an invalid hour.", value=value)
    if minute > 59:
        raise InvalidInputError(f"{value!r} has an invalid minute.", value=value)
    return value


def validate_id(value: Any) -> int:
    """
    Return the absolute value of an integer identifier.

    Negative numbers are flipped rather than rejected. Booleans, floats, numeric
    strings and everything else that is not an ``int`` raise ``InvalidInputError``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{value!r} is not a valid integer ID.", value=value)
    return abs(value)


def validate_string_id(value: Any) -> str:
    """Identifiers of votes are alphanumeric (e.g. ``"2265603-43"``)."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{value!r} is not a valid string ID.", value=value)
    return value.strip()
