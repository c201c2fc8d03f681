"""Result container and error taxonomy for trycase.

- Result/Ok/Err: success-or-error container, ResultContractError on misuse
- ErrorCode/ParseTarget: stable codes and parse targets
- CollectionError/FileError/JsonError/ParseError/HttpError: domain errors
- HttpJsonError: composite error for fetch-and-decode operations
- attempt/attempt_async: the failure boundary used by every toolkit
"""

from .boundary import UnclassifiedError, attempt, attempt_async, rejected
from .errors import (
    CollectionError,
    DomainError,
    FileError,
    HttpError,
    HttpJsonError,
    JsonError,
    ParseError,
    ToolkitError,
)
from .result import Err, Ok, Result, ResultContractError
from .types import ErrorCode, JsonDict, MissingArgumentError, ParseTarget

__all__ = [
    # Result
    "Result", "Ok", "Err", "ResultContractError",
    # Codes & causes
    "ErrorCode", "ParseTarget", "MissingArgumentError", "JsonDict",
    # Taxonomy
    "ToolkitError", "DomainError", "CollectionError", "FileError", "JsonError", "ParseError", "HttpError",
    "HttpJsonError",
    # Boundary
    "attempt", "attempt_async", "rejected", "UnclassifiedError",
]
