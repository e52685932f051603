"""Tests for exceptions module."""

from camara_client import (BadRequestError, CamaraClientError,
                           HTTPStatusError, InvalidInputError,
                           MalformedResponseError, NotFoundError,
                           TransportError, TypeMismatchError,
                           UnknownOptionError, UpstreamServerError)


def test_base_error_returns_message():
    assert str(CamaraClientError(message="Test error")) == "Test error"


def test_unknown_option_names_the_key():
    error = UnknownOptionError("accepted options: id, nome", option="bogus")
    assert "bogus" in str(error)
    assert isinstance(error, ValueError)


def test_type_mismatch_is_a_type_error():
    error = TypeMismatchError("got int", option="id", expected="a list of integers")
    assert isinstance(error, TypeError)
    assert "a list of integers" in str(error)


def test_status_errors_carry_url_and_status():
    error = NotFoundError("Resource not found.", url="https://x/deputados/1", status_code=404)
    result = str(error)
    assert "404" in result
    assert "https://x/deputados/1" in result
    assert isinstance(error, HTTPStatusError)


def test_hierarchy():
    for cls in (InvalidInputError, BadRequestError, UpstreamServerError,
                MalformedResponseError, TransportError):
        assert issubclass(cls, CamaraClientError)
    assert not issubclass(UpstreamServerError, NotFoundError)
