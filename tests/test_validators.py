# tests/test_validators.py
import re
from datetime import date, datetime, time

import pytest

from camara_client import (InvalidInputError, validate_date, validate_id,
                           validate_string_id, validate_time)

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@pytest.mark.parametrize("value", [
    "2023-01-01", "1999-12-31", "2024-02-29", "2021-06-15", "0001-01-01",
    "2023-02-31",  # day is only checked against 31, not against the month
])
def test_validate_date_canonical_string_is_identity(value):
    assert validate_date(value) == value


@pytest.mark.parametrize("value", [
    date(2024, 3, 5),
    datetime(2019, 11, 30, 23, 59),
    date(5, 1, 9),
])
def test_validate_date_calendar_objects(value):
    out = validate_date(value)
    assert DATE_RE.match(out)
    assert out.endswith(f"-{value.month:02d}-{value.day:02d}")


def test_validate_date_formats_from_local_fields():
    assert validate_date(date(2024, 3, 5)) == "2024-03-05"
    assert validate_date(datetime(2023, 12, 1, 8, 0)) == "2023-12-01"


@pytest.mark.parametrize("value", [
    "2023-13-01", "2023-00-10", "2023-01-00", "2023-01-32",
    "23-01-01", "2023/01/01", "2023-1-1", "abcd-ef-gh", "", "2023-01-01T00:00",
    None, 20230101, ["2023-01-01"],
])
def test_validate_date_rejects(value):
    with pytest.raises(InvalidInputError):
        validate_date(value)


@pytest.mark.parametrize("value", ["00:00", "09:05", "23:59", "24:00", "24:59"])
def test_validate_time_canonical_string(value):
    assert validate_time(value) == value


def test_validate_time_calendar_objects():
    assert validate_time(time(7, 3)) == "07:03"
    assert validate_time(datetime(2024, 1, 1, 18, 45, 12)) == "18:45"


@pytest.mark.parametrize("value", ["25:00", "12:60", "-1:30", "1:30", "12h30", "", None, 1230, date(2024, 1, 1)])
def test_validate_time_rejects(value):
    with pytest.raises(InvalidInputError):
        validate_time(value)


@pytest.mark.parametrize("value", [0, 1, 525, -525, -1, 10 ** 12, -(10 ** 12)])
def test_validate_id_returns_absolute_value(value):
    assert validate_id(value) == abs(value)


@pytest.mark.parametrize("value", [1.5, 2.0, "525", None, True, False, [1], float("nan")])
def test_validate_id_rejects_non_integers(value):
    with pytest.raises(InvalidInputError) as exc:
        validate_id(value)
    assert exc.value.value is value


def test_validate_string_id():
    assert validate_string_id("2265603-43") == "2265603-43"
    for bad in ("", "   ", None, 2265603):
        with pytest.raises(InvalidInputError):
            validate_string_id(bad)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        validate_date("nope")
