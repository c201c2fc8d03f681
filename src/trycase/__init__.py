"""trycase - exception-free wrappers returning explicit Results.

Converts throwing operations (collection access, file I/O, JSON, parsing, HTTP)
into calls that return ``Result[value, error]`` with a typed, inspectable error.

Quick Start:
    >>> from trycase import try_get_value, try_parse_int, ErrorCode
    >>>
    >>> result = try_parse_int("42")
    >>> result.unwrap()
    42
    >>>
    >>> missing = try_get_value({"a": 1}, "b")
    >>> missing.is_err(), missing.unwrap_err().code == ErrorCode.COLLECTION
    (True, True)

Pattern Matching on the closed error set:
    >>> match result.err():
    ...     case ParseError(target_type=target):
    ...         print(f"could not parse into {target}")
    ...     case None:
    ...         print("ok")

Async HTTP with JSON decoding:
    >>> result = await try_get_json(client, "https://api.example.com/users/1", User)
    >>> if result.is_err() and result.unwrap_err().is_json_error:
    ...     log.warning("bad payload: %s", result.unwrap_err().json_error.message)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration
from .foundation.config import (
    SettingsError,
    TrycaseSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

# Result & errors
from .foundation.errors import (
    CollectionError,
    DomainError,
    Err,
    ErrorCode,
    FileError,
    HttpError,
    HttpJsonError,
    JsonError,
    MissingArgumentError,
    Ok,
    ParseError,
    ParseTarget,
    Result,
    ResultContractError,
    ToolkitError,
)

# Toolkits
from .tools import (
    JsonOptions,
    try_delete,
    try_deserialize,
    try_first,
    try_get,
    try_get_at,
    try_get_bytes,
    try_get_json,
    try_get_string,
    try_get_value,
    try_last,
    try_parse_bool,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_double,
    try_parse_guid,
    try_parse_int,
    try_parse_long,
    try_parse_uuid,
    try_patch,
    try_patch_json,
    try_post,
    try_post_json,
    try_put,
    try_put_json,
    try_read_bytes,
    try_read_text,
    try_send,
    try_serialize,
    try_serialize_bytes,
    try_write_bytes,
    try_write_text,
)

__all__ = [
    "__version__",
    # Result
    "Result", "Ok", "Err", "ResultContractError",
    # Errors
    "ErrorCode", "ParseTarget", "MissingArgumentError", "ToolkitError", "DomainError",
    "CollectionError", "FileError", "JsonError", "ParseError", "HttpError", "HttpJsonError",
    # Collection
    "try_get_value", "try_get_at", "try_first", "try_last",
    # File
    "try_read_text", "try_read_bytes", "try_write_text", "try_write_bytes",
    # JSON
    "JsonOptions", "try_serialize", "try_serialize_bytes", "try_deserialize",
    # Parse
    "try_parse_int", "try_parse_long", "try_parse_double", "try_parse_decimal",
    "try_parse_bool", "try_parse_datetime", "try_parse_uuid", "try_parse_guid",
    # HTTP
    "try_send", "try_get", "try_post", "try_put", "try_patch", "try_delete",
    "try_get_string", "try_get_bytes",
    "try_get_json", "try_post_json", "try_put_json", "try_patch_json",
    # Configuration
    "TrycaseSettings", "SettingsError", "get_settings", "clear_settings_cache", "configure_logging",
]
