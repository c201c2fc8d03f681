"""Result/Either container for exception-free outcomes.

Discriminated union for success/failure returned by every toolkit operation:
- Queries: is_ok, is_err, truthiness
- Extraction: unwrap, unwrap_err, expect, expect_err (raise ResultContractError on misuse)
- Functor/Monad helpers: map, map_err, flat_map, or_else

Results are immutable once constructed. Reading the wrong variant is API misuse,
surfaced as ResultContractError rather than as a modeled domain failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type

_OK = True
_ERR = False


class ResultContractError(RuntimeError):
    """Raised when a Result is read as the variant it does not hold.

    Carries the wrapped payload (the error of an Err, or the value of an Ok)
    so the misuse can be diagnosed without another lookup.
    """

    def __init__(self, message: str, payload: object = None) -> None:
        super().__init__(message)
        self.payload = payload


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Exactly one variant is populated. Build with Ok() / Err(), never directly.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> Ok("42").flat_map(lambda s: Ok(int(s))).unwrap()
        42
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            ResultContractError: If Result is Err. The error is attached as ``payload``.
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise ResultContractError(f"unwrap() on Err: {self._value}", self._value)

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            ResultContractError: If Result is Ok. The value is attached as ``payload``.
        """
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise ResultContractError(f"unwrap_err() on Ok: {self._value!r}", self._value)

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom contract-violation message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise ResultContractError(f"{msg}: {self._value}", self._value)

    def expect_err(self, msg: str) -> E:
        """Extract Err value with custom contract-violation message."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise ResultContractError(f"{msg}: {self._value!r}", self._value)

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Used to lift a domain error into a composite one."""
        return Err(f(self._value)) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        return f(self._value) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    # ─── Inspection ──────────────────────────────────────────────────────

    def ok(self) -> T | None:
        """Value if Ok, None if Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Error if Err, None if Ok."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure). The error must not be None."""
    if error is None:
        raise ResultContractError("Err() requires an error value, got None")
    return Result(error, _ERR)
