"""Closed error taxonomy for the toolkits.

One frozen model per domain, each with a fixed ``code``:

- CollectionError: key/index/first/last access failures
- FileError: file read/write failures
- JsonError: encode/decode failures
- ParseError: text to typed value conversion failures
- HttpError: transport and argument failures of HTTP calls
- HttpJsonError: composite of HttpError | JsonError for fetch-and-decode calls

``DomainError`` is the discriminated union of all six, keyed on ``code``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union, final

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from .types import ErrorCode, JsonDict, ParseTarget

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    arbitrary_types_allowed=True,
    revalidate_instances="never",
)


class ToolkitError(BaseModel):
    """Base contract shared by every domain error.

    Attributes:
        code: Stable machine-readable identifier, fixed per subclass.
        message: Human-readable description.
        original_exception: The raw collaborator failure, kept for diagnostics.
            Excluded from serialization; use ``to_dict()`` for a JSON-safe summary.
    """

    model_config = _MODEL_CONFIG

    code: ErrorCode
    message: str
    original_exception: BaseException | None = Field(default=None, exclude=True, repr=False)

    def render(self) -> str:
        """Format as ``[code] message (cause: Type: text)``."""
        cause = self.original_exception
        suffix = f" (cause: {type(cause).__name__}: {cause})" if cause is not None else ""
        return f"[{self.code}] {self.message}{suffix}"

    __str__ = render

    def to_dict(self) -> JsonDict:
        """JSON-safe dict of all fields plus the cause's type and text."""
        data = self.model_dump(mode="json")
        cause = self.original_exception
        data["cause"] = None if cause is None else {"type": type(cause).__name__, "message": str(cause)}
        return data


@final
class CollectionError(ToolkitError):
    """Collection access failed. ``key`` is the key or index attempted, or "first"/"last"."""

    code: Literal[ErrorCode.COLLECTION] = ErrorCode.COLLECTION
    message: str = "Collection access failed."
    key: Any = None

    @field_serializer("key", when_used="json")
    def _serialize_key(self, v: Any) -> Any:
        return v if v is None or isinstance(v, (str, int, float, bool)) else repr(v)


@final
class FileError(ToolkitError):
    """File operation failed for ``file_path``."""

    code: Literal[ErrorCode.FILE] = ErrorCode.FILE
    message: str = "File operation failed."
    file_path: str | None = None


@final
class JsonError(ToolkitError):
    """JSON serialization or deserialization failed."""

    code: Literal[ErrorCode.JSON] = ErrorCode.JSON
    message: str = "JSON operation failed."


@final
class ParseError(ToolkitError):
    """Parsing ``input_value`` into ``target_type`` failed."""

    code: Literal[ErrorCode.PARSE] = ErrorCode.PARSE
    message: str = "Parsing operation failed."
    input_value: str = ""
    target_type: ParseTarget


@final
class HttpError(ToolkitError):
    """HTTP request failed.

    A response with a non-success status is only an HttpError when the caller
    asked for ``ensure_success``; ``status_code`` is set in that case.
    """

    code: Literal[ErrorCode.HTTP] = ErrorCode.HTTP
    message: str = "HTTP request failed."
    request_uri: str | None = None
    status_code: int | None = None


_HttpOrJson = Annotated[Union[HttpError, JsonError], Field(discriminator="code")]


@final
class HttpJsonError(ToolkitError):
    """Failure of a two-phase HTTP + JSON operation.

    Holds at most one inner error. The HTTP phase short-circuits: when it fails,
    decoding is never attempted and ``inner`` is the HttpError. When the HTTP
    phase succeeds but encoding/decoding fails, ``inner`` is the JsonError.
    An empty instance is a placeholder only and is never returned inside an Err.

    Example:
        >>> err = HttpJsonError.from_json(JsonError(message="bad payload"))
        >>> err.is_json_error, err.is_http_error
        (True, False)
        >>> err.underlying_error.message
        'bad payload'
    """

    code: Literal[ErrorCode.HTTP_JSON] = ErrorCode.HTTP_JSON
    message: str = "Unknown HTTP/JSON error"
    inner: _HttpOrJson | None = None

    @model_validator(mode="before")
    @classmethod
    def _inherit_message(cls, data: Any) -> Any:
        """Default ``message`` to the inner error's message."""
        if isinstance(data, dict) and "message" not in data and data.get("inner") is not None:
            inner = data["inner"]
            message = inner.get("message") if isinstance(inner, dict) else getattr(inner, "message", None)
            if message:
                data = {**data, "message": message}
        return data

    @classmethod
    def from_http(cls, error: HttpError) -> HttpJsonError:
        return cls(inner=error, original_exception=error.original_exception)

    @classmethod
    def from_json(cls, error: JsonError) -> HttpJsonError:
        return cls(inner=error, original_exception=error.original_exception)

    @property
    def is_http_error(self) -> bool:
        return isinstance(self.inner, HttpError)

    @property
    def is_json_error(self) -> bool:
        return isinstance(self.inner, JsonError)

    @property
    def http_error(self) -> HttpError | None:
        return self.inner if isinstance(self.inner, HttpError) else None

    @property
    def json_error(self) -> JsonError | None:
        return self.inner if isinstance(self.inner, JsonError) else None

    @property
    def underlying_error(self) -> HttpError | JsonError | None:
        """Whichever phase error is populated, or None for the placeholder."""
        return self.inner


DomainError = Annotated[
    Union[CollectionError, FileError, JsonError, ParseError, HttpError, HttpJsonError],
    Field(discriminator="code"),
]
