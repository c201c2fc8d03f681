"""Safe collection access: key lookup, index access, first and last element.

Each function returns ``Result[value, CollectionError]``; ``CollectionError.key``
holds the key or index attempted, or ``"first"`` / ``"last"`` for the
sequence accessors.

Example:
    >>> try_get_value({"a": 1}, "a").unwrap()
    1
    >>> try_get_at([1, 2, 3], -1).unwrap_err().key
    -1
    >>> try_first([]).unwrap_err().key
    'first'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from trycase.foundation.errors import (
    CollectionError,
    MissingArgumentError,
    Result,
    attempt,
    rejected,
)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_EMPTY = "Sequence contains no elements"
_MISSING = object()


class _EmptySequenceError(LookupError):
    """Raised inside the boundary when first/last finds no element."""

    def __init__(self) -> None:
        super().__init__(_EMPTY)


def try_get_value(mapping: Mapping[K, V] | None, key: K) -> Result[V, CollectionError]:
    """Look up ``key`` in a mapping. Missing or unhashable keys become CollectionError."""
    if mapping is None:
        return rejected(CollectionError(
            key=key, message="Dictionary cannot be None", original_exception=MissingArgumentError("mapping"),
        ))

    def classify(e: Exception) -> CollectionError:
        if isinstance(e, KeyError):
            return CollectionError(key=key, message=f"Key {key!r} was not found in the dictionary", original_exception=e)
        if isinstance(e, TypeError):
            return CollectionError(key=key, message=f"Invalid key type for dictionary: {key!r}", original_exception=e)
        return CollectionError(key=key, message=f"Unexpected error accessing dictionary with key: {key!r}", original_exception=e)

    return attempt(lambda: mapping[key], classify)


def try_get_at(sequence: Sequence[T] | None, index: int) -> Result[T, CollectionError]:
    """Element at ``index``. Negative indices are out of range, not counted from the end."""
    if sequence is None:
        return rejected(CollectionError(
            key=index, message="List cannot be None", original_exception=MissingArgumentError("sequence"),
        ))

    def get() -> T:
        if index < 0 or index >= len(sequence):
            raise IndexError(f"index {index} out of range")
        return sequence[index]

    def classify(e: Exception) -> CollectionError:
        if isinstance(e, IndexError):
            return CollectionError(
                key=index,
                message=f"Index {index} is out of range for list of length {len(sequence)}",
                original_exception=e,
            )
        return CollectionError(key=index, message=f"Unexpected error accessing list at index: {index}", original_exception=e)

    return attempt(get, classify)


def _sequence_error(accessor: str, e: Exception) -> CollectionError:
    if isinstance(e, _EmptySequenceError):
        return CollectionError(key=accessor, message=_EMPTY, original_exception=e)
    return CollectionError(
        key=accessor, message=f"Unexpected error getting {accessor} element from sequence", original_exception=e,
    )


def try_first(source: Iterable[T] | None) -> Result[T, CollectionError]:
    """First element of any iterable. Consumes at most one item from iterators."""
    if source is None:
        return rejected(CollectionError(
            key="first", message="Source cannot be None", original_exception=MissingArgumentError("source"),
        ))

    def first() -> T:
        for item in source:
            return item
        raise _EmptySequenceError()

    return attempt(first, lambda e: _sequence_error("first", e))


def try_last(source: Iterable[T] | None) -> Result[T, CollectionError]:
    """Last element of any iterable. Sequences are indexed directly, other iterables are drained."""
    if source is None:
        return rejected(CollectionError(
            key="last", message="Source cannot be None", original_exception=MissingArgumentError("source"),
        ))

    def last() -> T:
        if isinstance(source, Sequence):
            if not source:
                raise _EmptySequenceError()
            return source[-1]
        item: Any = _MISSING
        for item in source:
            pass
        if item is _MISSING:
            raise _EmptySequenceError()
        return item

    return attempt(last, lambda e: _sequence_error("last", e))

