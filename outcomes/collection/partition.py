"""Partition combinators

Split collections of Outcome / Optional values without failing."""

from __future__ import annotations

from collections.abc import Iterable

from ..optional import Absent, Optional, Present
from ..outcome import Failure, Outcome, Success


def partition[T, E](outcomes: Iterable[Outcome[T, E]]) -> tuple[list[T], list[E]]:
    """Separate into (values, errors), order preserved. Never fails."""
    successes: list[T] = []
    failures: list[E] = []

    for outcome in outcomes:
        match outcome:
            case Success(value):
                successes.append(value)
            case Failure(err):
                failures.append(err)

    return successes, failures


def collect_present[T](optionals: Iterable[Optional[T]]) -> list[T]:
    """Values of the Present items, Absent ones skipped."""
    values: list[T] = []
    for optional in optionals:
        match optional:
            case Present(value):
                values.append(value)
            case Absent():
                pass
    return values


__all__ = ("collect_present", "partition")
