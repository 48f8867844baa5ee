"""
Lifting values into Optional / Outcome.

Bridges from nullable values, exception-raising code and the kungfu
Result / Option / LazyCoroResult types.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .._types import Thunk
from ..optional import Absent, Optional, Present
from ..outcome import Failure, Outcome, Success


def from_nullable[T](value: T | None) -> Optional[T]:
    """
    Convert `T | None` to Optional. None becomes Absent().

    **When to use:** dict lookups, ORM queries, config reads - anywhere an API
    signals "nothing" with None.

    Example:
        port = from_nullable(settings.get("port")).map(int).unwrap_or(8080)
    """
    if value is None:
        return Absent()
    return Present(value)


def from_result[T, E](result: Result[T, E]) -> Outcome[T, E]:
    """
    Convert kungfu Result to Outcome: Ok -> Success, Error -> Failure.

    Example:
        from outcomes import lift as L

        outcome = L.up.from_result(await fetch_user(42))
    """
    match result:
        case Ok(value):
            return Success(value)
        case Error(err):
            return Failure(err)


def from_option[T](option: Option[T]) -> Optional[T]:
    """Convert kungfu Option to Optional: Some -> Present, Nothing -> Absent."""
    match option:
        case Some(value):
            return Present(value)
        case Nothing():
            return Absent()


async def from_lazy[T, E](lazy: LazyCoroResult[T, E]) -> Outcome[T, E]:
    """
    Run a kungfu LazyCoroResult and convert its Result.

    Example:
        outcome = await L.up.from_lazy(L.call(fetch_user_impl, api, 42))
    """
    result = await lazy
    return from_result(result)


def catching[T, E](
    thunk: Thunk[T],
    *,
    on_error: Callable[[Exception], E],
) -> Outcome[T, E]:
    """
    Execute sync thunk, catch exceptions and convert to Failure.

    **When to use:** Bridge between exception-based code and Outcome chains.

    Example:
        import json

        parsed = L.up.catching(
            lambda: json.loads(raw),
            on_error=lambda e: ParseError(str(e)),
        )

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return Success(thunk())
    except Exception as exc:
        return Failure(on_error(exc))


__all__ = (
    "catching",
    "from_lazy",
    "from_nullable",
    "from_option",
    "from_result",
)
