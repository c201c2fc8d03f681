"""Safe text to typed value conversion.

One function per target type. Failures carry the original text and the
attempted ``ParseTarget`` so callers can report what failed to parse into what.

Example:
    >>> try_parse_int("123").unwrap()
    123
    >>> err = try_parse_long("  ").unwrap_err()
    >>> err.target_type, err.input_value
    (<ParseTarget.LONG: 'long'>, '  ')
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from trycase.foundation.errors import MissingArgumentError, ParseError, ParseTarget, Result, attempt, rejected

T = TypeVar("T")

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

_ARTICLES = {ParseTarget.INT: "an integer", ParseTarget.LONG: "a long"}


def _describe(target: ParseTarget) -> str:
    return _ARTICLES.get(target, f"a {target.value}")


def _parse(value: str | None, target: ParseTarget, convert: Callable[[str], T]) -> Result[T, ParseError]:
    """Shared precondition check and boundary for every parse function."""
    if value is not None and not isinstance(value, str):
        return rejected(ParseError(
            input_value=repr(value),
            target_type=target,
            message=f"Value must be a string, not {type(value).__name__}",
            original_exception=TypeError(f"expected str, got {type(value).__name__}"),
        ))
    if value is None or not value.strip():
        return rejected(ParseError(
            input_value=value or "",
            target_type=target,
            message="Value cannot be None or empty",
            original_exception=MissingArgumentError("value", "Value cannot be None or empty"),
        ))

    def classify(e: Exception) -> ParseError:
        if isinstance(e, OverflowError):
            message = f"'{value}' is too large or too small for {_describe(target)}"
        elif isinstance(e, (ValueError, ArithmeticError)):
            message = f"'{value}' is not a valid {target.value} format"
        else:
            message = f"Unexpected error parsing '{value}' to {target.value}"
        return ParseError(input_value=value, target_type=target, message=message, original_exception=e)

    return attempt(lambda: convert(value), classify)


def _bounded_int(low: int, high: int, base: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        number = int(text, base)
        if not low <= number <= high:
            raise OverflowError(f"{number} outside [{low}, {high}]")
        return number
    return convert


def _strip_thousands(text: str, allow_thousands: bool) -> str:
    return text.replace(",", "").replace("_", "") if allow_thousands else text


def try_parse_int(value: str | None, *, base: int = 10) -> Result[int, ParseError]:
    """Parse a signed 32-bit integer."""
    return _parse(value, ParseTarget.INT, _bounded_int(INT32_MIN, INT32_MAX, base))


def try_parse_long(value: str | None, *, base: int = 10) -> Result[int, ParseError]:
    """Parse a signed 64-bit integer."""
    return _parse(value, ParseTarget.LONG, _bounded_int(INT64_MIN, INT64_MAX, base))


def try_parse_double(value: str | None, *, allow_thousands: bool = True) -> Result[float, ParseError]:
    """Parse a float. ``allow_thousands`` accepts ``,`` group separators."""
    return _parse(value, ParseTarget.DOUBLE, lambda text: float(_strip_thousands(text, allow_thousands)))


def try_parse_decimal(value: str | None, *, allow_thousands: bool = True) -> Result[Decimal, ParseError]:
    """Parse an exact decimal. NaN and Infinity are rejected."""
    def convert(text: str) -> Decimal:
        number = Decimal(_strip_thousands(text.strip(), allow_thousands))
        if not number.is_finite():
            raise InvalidOperation(f"non-finite decimal: {text}")
        return number
    return _parse(value, ParseTarget.DECIMAL, convert)


def try_parse_bool(value: str | None) -> Result[bool, ParseError]:
    """Parse ``true`` / ``false`` case-insensitively, ignoring surrounding whitespace."""
    def convert(text: str) -> bool:
        match text.strip().lower():
            case "true":
                return True
            case "false":
                return False
        raise ValueError(f"String was not recognized as a valid boolean: {text!r}")
    return _parse(value, ParseTarget.BOOL, convert)


def try_parse_datetime(value: str | None, fmt: str | None = None) -> Result[datetime, ParseError]:
    """Parse ISO-8601 text, or text matching the ``strptime`` format ``fmt``."""
    def convert(text: str) -> datetime:
        return datetime.strptime(text.strip(), fmt) if fmt else datetime.fromisoformat(text.strip())
    return _parse(value, ParseTarget.DATETIME, convert)


def try_parse_uuid(value: str | None) -> Result[uuid.UUID, ParseError]:
    """Parse a GUID in any form ``uuid.UUID`` accepts (hyphenated, braced, urn, hex)."""
    return _parse(value, ParseTarget.UUID, lambda text: uuid.UUID(text.strip()))


try_parse_guid = try_parse_uuid


__all__ = [
    "INT32_MAX", "INT32_MIN", "INT64_MAX", "INT64_MIN",
    "try_parse_bool", "try_parse_datetime", "try_parse_decimal", "try_parse_double",
    "try_parse_guid", "try_parse_int", "try_parse_long", "try_parse_uuid",
]
