"""
Lowering Optional / Outcome into other representations.

Counterpart of `up`: back to nullable values and kungfu types.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from ..optional import Absent, Optional, Present
from ..outcome import Failure, Outcome, Success


def to_nullable[T](optional: Optional[T]) -> T | None:
    """Present(v) -> v, Absent() -> None."""
    match optional:
        case Present(value):
            return value
        case Absent():
            return None


def to_result[T, E](outcome: Outcome[T, E]) -> Result[T, E]:
    """
    Convert Outcome to kungfu Result: Success -> Ok, Failure -> Error.

    **When to use:** handing an Outcome to code built on kungfu / combinators.
    """
    match outcome:
        case Success(value):
            return Ok(value)
        case Failure(err):
            return Error(err)


def to_option[T](optional: Optional[T]) -> Option[T]:
    """Convert Optional to kungfu Option: Present -> Some, Absent -> Nothing."""
    match optional:
        case Present(value):
            return Some(value)
        case Absent():
            return Nothing()


def to_lazy[T, E](outcome: Outcome[T, E]) -> LazyCoroResult[T, E]:
    """
    Lift already-computed Outcome into a kungfu LazyCoroResult.

    NOTE: This is NOT lazy - the outcome is already computed, the coroutine
          only hands over its converted Result.
    """
    result = to_result(outcome)

    async def run() -> Result[T, E]:
        return result

    return LazyCoroResult(run)


__all__ = (
    "to_lazy",
    "to_nullable",
    "to_option",
    "to_result",
)
