"""The failure boundary: run a collaborator call and convert its exceptions into an Err.

Every toolkit operation crosses this boundary exactly once. Only ``Exception``
subclasses are caught; ``KeyboardInterrupt``, ``SystemExit`` and
``asyncio.CancelledError`` keep propagating.

If a classifier raises, it is called once more with an UnclassifiedError so its
catch-all branch produces the Err instead.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from .errors import ToolkitError
from .result import Result, _ERR, _OK

T = TypeVar("T")
E = TypeVar("E", bound=ToolkitError)

logger = logging.getLogger("trycase.boundary")


class UnclassifiedError(Exception):
    """A collaborator failure whose classifier itself raised.

    Handed back to the same classifier, which treats it as unexpected.
    The collaborator's exception is ``__cause__``.
    """


def _classified(exc: Exception, classify: Callable[[Exception], E]) -> Result[T, E]:
    try:
        error = classify(exc)
    except Exception as failure:
        logger.warning("classifier failed on %s: %r", type(exc).__name__, failure)
        wrapped = UnclassifiedError(f"{type(exc).__name__}: {exc}")
        wrapped.__cause__ = exc
        error = classify(wrapped)
    logger.debug("[%s] %s (%s)", error.code, error.message, type(exc).__name__)
    return Result(error, _ERR)


def rejected(error: E) -> Result[T, E]:
    """Err for a precondition that failed before the collaborator was called."""
    logger.debug("[%s] %s (precondition)", error.code, error.message)
    return Result(error, _ERR)


def attempt(operation: Callable[[], T], classify: Callable[[Exception], E]) -> Result[T, E]:
    """Execute operation, wrapping its return in Ok or its exception, classified, in Err.

    Example:
        >>> attempt(lambda: int("7"), lambda e: ParseError(target_type=ParseTarget.INT)).unwrap()
        7
    """
    try:
        return Result(operation(), _OK)
    except Exception as e:
        return _classified(e, classify)


async def attempt_async(operation: Callable[[], Awaitable[T]], classify: Callable[[Exception], E]) -> Result[T, E]:
    """Async version - awaits the collaborator once, converts exceptions to Err."""
    try:
        return Result(await operation(), _OK)
    except Exception as e:
        return _classified(e, classify)
