"""Tests for the Result container.

Validates:
- Variant queries and extraction
- Contract violations on wrong-variant reads
- Immutability
- Functor/monad helpers preserve the single-variant invariant
"""

from __future__ import annotations

from typing import Callable

import pytest

from trycase import Err, Ok, Result, ResultContractError
from trycase.foundation.errors import JsonError


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    """Ok variant answers queries and yields its value."""
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert bool(result)
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None


def test_err_construction() -> None:
    """Err variant answers queries and yields its error."""
    result: Result[int, str] = Err("failed")

    assert not result.is_ok()
    assert result.is_err()
    assert not result
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"


def test_ok_may_wrap_none() -> None:
    """Void-like operations succeed with Ok(None)."""
    result: Result[None, str] = Ok(None)
    assert result.is_ok()
    assert result.unwrap() is None


def test_err_rejects_none() -> None:
    with pytest.raises(ResultContractError):
        Err(None)


# ═════════════════════════════════════════════════════════════════════════════
# Contract Violations
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_on_err_raises_with_error_payload() -> None:
    error = JsonError(message="bad")
    with pytest.raises(ResultContractError) as info:
        Err(error).unwrap()
    assert info.value.payload is error
    assert isinstance(info.value, RuntimeError)


def test_unwrap_err_on_ok_raises_with_value_payload() -> None:
    with pytest.raises(ResultContractError) as info:
        Ok(7).unwrap_err()
    assert info.value.payload == 7


def test_expect_uses_custom_message() -> None:
    with pytest.raises(ResultContractError, match="needed a value"):
        Err("boom").expect("needed a value")
    with pytest.raises(ResultContractError, match="needed an error"):
        Ok(1).expect_err("needed an error")
    assert Ok(1).expect("unused") == 1
    assert Err("e").expect_err("unused") == "e"


def test_unwrap_or_variants() -> None:
    assert Ok(1).unwrap_or(0) == 1
    assert Err("e").unwrap_or(0) == 0
    assert Err("abc").unwrap_or_else(len) == 3


# ═════════════════════════════════════════════════════════════════════════════
# Immutability
# ═════════════════════════════════════════════════════════════════════════════


def test_result_is_immutable() -> None:
    result: Result[int, str] = Ok(1)
    with pytest.raises(AttributeError):
        result._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result._is_ok = False  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del result._value
    assert result.unwrap() == 1


# ═════════════════════════════════════════════════════════════════════════════
# Functor / Monad Helpers
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """fmap id = id"""
    assert Ok(42).map(lambda x: x) == Ok(42)
    assert Err("fail").map(lambda x: x) == Err("fail")


def test_functor_composition() -> None:
    """fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_left_identity() -> None:
    """return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).flat_map(f) == f(42)


def test_monad_associativity() -> None:
    """(m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


def test_flat_map_short_circuits_on_err() -> None:
    calls: list[int] = []

    def step(x: int) -> Result[int, str]:
        calls.append(x)
        return Ok(x)

    assert Err("stop").flat_map(step).unwrap_err() == "stop"
    assert Err("stop").and_then(step).is_err()
    assert calls == []


def test_map_err_lifts_error_only() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}").unwrap_err() == "Error: fail"
    assert Ok(42).map_err(lambda e: f"Error: {e}").unwrap() == 42


def test_or_else_recovers() -> None:
    assert Err("e").or_else(lambda e: Ok(len(e))).unwrap() == 1
    assert Ok(3).or_else(lambda e: Ok(0)).unwrap() == 3


def test_match_is_exhaustive() -> None:
    describe = dict(ok=lambda v: f"value {v}", err=lambda e: f"error {e}")
    assert Ok(1).match(**describe) == "value 1"
    assert Err("x").match(**describe) == "error x"


def test_iteration_and_repr() -> None:
    assert list(Ok(1)) == [1]
    assert list(Err("e")) == []
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("e")) == "Err('e')"


def test_structural_pattern_matching() -> None:
    match Ok(5):
        case Result(value) if value > 3:
            matched = value
        case _:
            matched = None
    assert matched == 5


def test_equality_distinguishes_variants() -> None:
    assert Ok("x") != Err("x")
    assert hash(Ok(1)) == hash(Ok(1))
