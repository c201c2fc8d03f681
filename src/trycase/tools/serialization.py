"""Safe JSON (de)serialization backed by orjson and pydantic.

Encoding goes through ``orjson.dumps`` (pydantic models, dataclasses, datetimes,
UUIDs, enums and Decimals supported). Decoding goes through ``orjson.loads``
and, when a target type is given, ``pydantic.TypeAdapter`` validation.
NaN and Infinity have no JSON form and fail to serialize rather than becoming null.

Example:
    >>> try_serialize({"a": 1}).unwrap()
    '{"a":1}'
    >>> try_deserialize(b"[1, 2]", list[int]).unwrap()
    [1, 2]
    >>> try_deserialize("null").unwrap_err().message
    'Deserialization resulted in null'
"""

from __future__ import annotations

import dataclasses
import math
import types
from decimal import Decimal
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin, overload

import orjson
from pydantic import BaseModel, ConfigDict, PydanticUserError, TypeAdapter, ValidationError

from trycase.foundation.config import SettingsError, get_settings
from trycase.foundation.errors import JsonError, MissingArgumentError, Result, attempt, rejected

T = TypeVar("T")

JsonInput = Union[str, bytes, bytearray, memoryview]


class JsonOptions(BaseModel):
    """Encoder/decoder configuration.

    Attributes:
        indent: Pretty-print with two-space indentation.
        sort_keys: Emit object keys in sorted order.
        naive_utc: Serialize naive datetimes as UTC.
        strict: Disable type coercion when validating into a target type.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: bool = False
    sort_keys: bool = False
    naive_utc: bool = False
    strict: bool = False

    @classmethod
    def from_settings(cls) -> JsonOptions:
        s = get_settings().serialization
        return cls(indent=s.indent, sort_keys=s.sort_keys, naive_utc=s.naive_utc, strict=s.strict)

    @property
    def orjson_flags(self) -> int:
        flags = 0
        if self.indent:
            flags |= orjson.OPT_INDENT_2
        if self.sort_keys:
            flags |= orjson.OPT_SORT_KEYS
        if self.naive_utc:
            flags |= orjson.OPT_NAIVE_UTC
        return flags


class _NullResultError(ValueError):
    """Decoded JSON was null for a target that does not admit None."""


def _encode_default(obj: Any) -> Any:
    """Fallback for types orjson does not encode natively."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _admits_none(target: Any) -> bool:
    if target is None or target is type(None):
        return True
    origin = get_origin(target)
    if origin is Annotated:
        return _admits_none(get_args(target)[0])
    if origin is Union or origin is types.UnionType:
        return any(_admits_none(arg) for arg in get_args(target))
    return False


def _reject_non_finite(value: Any, seen: set[int] | None = None) -> None:
    """Raise ValueError on NaN or Infinity, which orjson would silently write as null."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Out of range float values are not JSON compliant: {value!r}")
        return
    if isinstance(value, BaseModel):
        value = value.model_dump()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        seen = set() if seen is None else seen
        if id(value) in seen:
            return
        seen.add(id(value))
        for item in value.values() if isinstance(value, dict) else value:
            _reject_non_finite(item, seen)


def _encode(value: Any, options: JsonOptions | None) -> bytes:
    opts = options or JsonOptions.from_settings()
    _reject_non_finite(value)
    return orjson.dumps(value, default=_encode_default, option=opts.orjson_flags)


def _serialize_error(value: Any):
    name = type(value).__name__

    def classify(e: Exception) -> JsonError:
        if isinstance(e, SettingsError):
            return JsonError(message=str(e), original_exception=e)
        if isinstance(e, (orjson.JSONEncodeError, ValueError)):
            return JsonError(message=f"Failed to serialize {name} to JSON", original_exception=e)
        return JsonError(message=f"Unexpected error during JSON serialization of {name}", original_exception=e)

    return classify


def try_serialize(value: Any, options: JsonOptions | None = None) -> Result[str, JsonError]:
    """Encode ``value`` as a JSON string. None encodes as ``"null"``."""
    return attempt(lambda: _encode(value, options).decode("utf-8"), _serialize_error(value))


def try_serialize_bytes(value: Any, options: JsonOptions | None = None) -> Result[bytes, JsonError]:
    """Encode ``value`` as UTF-8 JSON bytes."""
    return attempt(lambda: _encode(value, options), _serialize_error(value))


@overload
def try_deserialize(data: JsonInput | None, target: type[T], options: JsonOptions | None = None) -> Result[T, JsonError]: ...
@overload
def try_deserialize(data: JsonInput | None, target: Any = ..., options: JsonOptions | None = None) -> Result[Any, JsonError]: ...


def try_deserialize(data: JsonInput | None, target: Any = Any, options: JsonOptions | None = None) -> Result[Any, JsonError]:
    """Decode JSON text or UTF-8 bytes, optionally validating into ``target``.

    Empty/blank/None input, malformed JSON, validation failures, and a decoded
    ``null`` for a target that does not admit None all yield JsonError.
    """
    if data is None:
        return rejected(JsonError(message="JSON input cannot be None", original_exception=MissingArgumentError("data")))
    if isinstance(data, str) and not data.strip():
        return rejected(JsonError(
            message="JSON string cannot be None or empty",
            original_exception=MissingArgumentError("data", "JSON string cannot be None or empty"),
        ))
    if isinstance(data, (bytes, bytearray, memoryview)) and len(data) == 0:
        return rejected(JsonError(
            message="UTF-8 JSON bytes cannot be empty",
            original_exception=MissingArgumentError("data", "UTF-8 JSON bytes cannot be empty"),
        ))

    name = _type_name(target)

    def decode() -> Any:
        opts = options or JsonOptions.from_settings()
        if not isinstance(data, (str, bytes, bytearray, memoryview)):
            raise TypeError(f"JSON input must be str or bytes, not {type(data).__name__}")
        raw = orjson.loads(data)
        if raw is None and not _admits_none(target):
            raise _NullResultError("Deserialization resulted in null")
        if target is Any:
            return raw
        return TypeAdapter(target).validate_python(raw, strict=opts.strict)

    def classify(e: Exception) -> JsonError:
        if isinstance(e, SettingsError):
            return JsonError(message=str(e), original_exception=e)
        if isinstance(e, _NullResultError):
            return JsonError(message="Deserialization resulted in null", original_exception=e)
        if isinstance(e, (orjson.JSONDecodeError, ValidationError)):
            return JsonError(message=f"Failed to deserialize JSON to {name}", original_exception=e)
        if isinstance(e, PydanticUserError):
            return JsonError(message=f"Type {name} is not supported for JSON deserialization", original_exception=e)
        if isinstance(e, TypeError):
            return JsonError(message=f"Input of type {type(data).__name__} is not JSON text or bytes", original_exception=e)
        return JsonError(message=f"Unexpected error during JSON deserialization to {name}", original_exception=e)

    return attempt(decode, classify)
