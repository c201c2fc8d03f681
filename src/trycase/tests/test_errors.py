"""Tests for the error taxonomy and the HTTP/JSON composite."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from trycase import (
    CollectionError,
    DomainError,
    ErrorCode,
    FileError,
    HttpError,
    HttpJsonError,
    JsonError,
    MissingArgumentError,
    ParseError,
    ParseTarget,
)


# ═════════════════════════════════════════════════════════════════════════════
# Codes & Defaults
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (CollectionError(), "Collection.AccessError"),
        (FileError(), "File.IOError"),
        (JsonError(), "Json.SerializationError"),
        (ParseError(target_type=ParseTarget.INT), "Parse.FormatError"),
        (HttpError(), "Http.RequestError"),
        (HttpJsonError(), "HttpJson.CompositeError"),
    ],
)
def test_codes_are_stable(error, code: str) -> None:
    assert error.code == code
    assert isinstance(error.code, ErrorCode)


def test_code_is_fixed_per_kind() -> None:
    """A kind cannot be constructed with another kind's code."""
    with pytest.raises(ValidationError):
        JsonError(code=ErrorCode.FILE)


def test_errors_are_frozen() -> None:
    error = FileError(file_path="a.txt", message="missing")
    with pytest.raises(ValidationError):
        error.message = "changed"  # type: ignore[misc]


def test_unknown_fields_rejected() -> None:
    with pytest.raises(ValidationError):
        JsonError(message="x", path="nope")  # type: ignore[call-arg]


def test_parse_error_requires_target() -> None:
    with pytest.raises(ValidationError):
        ParseError(input_value="x")  # type: ignore[call-arg]


def test_http_status_code_accepts_non_standard_values() -> None:
    """Servers may answer with any integer status; the error must still build."""
    assert HttpError(status_code=404).status_code == 404
    assert HttpError(status_code=999).status_code == 999


# ═════════════════════════════════════════════════════════════════════════════
# Rendering
# ═════════════════════════════════════════════════════════════════════════════


def test_render_includes_code_message_and_cause() -> None:
    error = FileError(file_path="x", message="File not found: x", original_exception=FileNotFoundError("x"))
    assert str(error) == "[File.IOError] File not found: x (cause: FileNotFoundError: x)"
    assert JsonError(message="bad").render() == "[Json.SerializationError] bad"


def test_to_dict_is_json_safe() -> None:
    error = CollectionError(key=("a", 1), message="missing", original_exception=KeyError("a"))
    data = error.to_dict()

    assert data["code"] == "Collection.AccessError"
    assert data["key"] == repr(("a", 1))
    assert data["cause"] == {"type": "KeyError", "message": "'a'"}
    assert "original_exception" not in data


def test_missing_argument_error() -> None:
    e = MissingArgumentError("client")
    assert isinstance(e, ValueError)
    assert e.argument == "client"
    assert "client" in str(e)


# ═════════════════════════════════════════════════════════════════════════════
# Composite
# ═════════════════════════════════════════════════════════════════════════════


def test_composite_from_http() -> None:
    cause = ConnectionError("refused")
    http = HttpError(request_uri="https://x", message="request failed", original_exception=cause)
    error = HttpJsonError.from_http(http)

    assert error.is_http_error
    assert not error.is_json_error
    assert error.http_error is http
    assert error.json_error is None
    assert error.underlying_error is http
    assert error.message == "request failed"
    assert error.original_exception is cause


def test_composite_from_json() -> None:
    json_error = JsonError(message="bad payload")
    error = HttpJsonError.from_json(json_error)

    assert error.is_json_error
    assert not error.is_http_error
    assert error.json_error is json_error
    assert error.underlying_error.message == "bad payload"


def test_composite_placeholder() -> None:
    error = HttpJsonError()
    assert not error.is_http_error
    assert not error.is_json_error
    assert error.underlying_error is None
    assert error.message == "Unknown HTTP/JSON error"


def test_composite_explicit_message_wins() -> None:
    error = HttpJsonError(inner=JsonError(message="inner"), message="outer")
    assert error.message == "outer"


def test_composite_rejects_other_kinds() -> None:
    with pytest.raises(ValidationError):
        HttpJsonError(inner=FileError())  # type: ignore[arg-type]


# ═════════════════════════════════════════════════════════════════════════════
# Discriminated Union
# ═════════════════════════════════════════════════════════════════════════════


def test_domain_error_dispatches_on_code() -> None:
    adapter = TypeAdapter(DomainError)

    parsed = adapter.validate_python({"code": "Parse.FormatError", "input_value": "abc", "target_type": "int"})
    assert isinstance(parsed, ParseError)
    assert parsed.target_type is ParseTarget.INT

    nested = adapter.validate_python({
        "code": "HttpJson.CompositeError",
        "inner": {"code": "Http.RequestError", "message": "down", "request_uri": "https://x"},
    })
    assert isinstance(nested, HttpJsonError)
    assert nested.is_http_error
    assert nested.message == "down"


def test_domain_error_round_trips_through_json() -> None:
    adapter = TypeAdapter(DomainError)
    original = HttpError(request_uri="https://x", status_code=503, message="unavailable")
    assert adapter.validate_json(original.model_dump_json()) == original
