"""Stable codes, parse targets, and argument-failure causes shared by all toolkits."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

JsonDict = dict[str, Any]


class ErrorCode(StrEnum):
    """Machine-readable error codes, one per domain. Values are part of the public contract."""
    COLLECTION = "Collection.AccessError"
    FILE = "File.IOError"
    JSON = "Json.SerializationError"
    PARSE = "Parse.FormatError"
    HTTP = "Http.RequestError"
    HTTP_JSON = "HttpJson.CompositeError"


class ParseTarget(StrEnum):
    """Target types of the parse toolkit."""
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BOOL = "bool"
    DATETIME = "datetime"
    UUID = "uuid"


class MissingArgumentError(ValueError):
    """Cause attached to an error when a required argument was None or blank."""

    __slots__ = ("argument",)

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' cannot be None")
