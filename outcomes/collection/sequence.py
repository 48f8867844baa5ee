"""Sequence combinators

Structure flipping: [Outcome[T, E]] -> Outcome[[T], E]."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..outcome import Failure, Outcome, Success


def traverse[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], Outcome[T, E]],
) -> Outcome[list[T], E]:
    """
    Monadic map: A -> Outcome[T, E], collected into Outcome[list[T], E].

    Stops at the first Failure and returns it unchanged; `handler` is not
    called for the remaining items.
    """
    values: list[T] = []
    for item in items:
        match handler(item):
            case Success(value):
                values.append(value)
            case Failure(_) as failure:
                return failure
    return Success(values)


def sequence[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """
    Flip structure: [Outcome[T]] -> Outcome[[T]].

    Implemented as traverse(id).
    """
    return traverse(outcomes, handler=lambda o: o)


__all__ = ("sequence", "traverse")
