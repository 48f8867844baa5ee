"""
Optional - value that may be absent
===================================

Two variants:
- Present(value): a value is there
- Absent(): nothing is there

Both are immutable and compare by variant and payload, so `Absent() == Absent()`
holds regardless of which instance you got.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import UnwrapError
from .._types import Effect, Predicate, Thunk

if typing.TYPE_CHECKING:
    from ..outcome import Outcome


@dataclass(frozen=True, slots=True)
class Present[T]:
    """Optional holding a value."""

    value: T

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    # Combination

    def and_[U](self, other: Optional[U], /) -> Optional[U]:
        """Return `other`: self has a value, so the second option decides."""
        return other

    def and_then[U](self, f: Callable[[T], Optional[U]], /) -> Optional[U]:
        """Monadic bind: feed the value into `f`, which returns an Optional."""
        return f(self.value)

    def or_(self, other: Optional[T], /) -> Optional[T]:
        return self

    def or_else(self, f: Thunk[Optional[T]], /) -> Optional[T]:
        return self

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Present[U]:
        """Functor fmap - apply `f` to the value."""
        return Present(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U], /) -> U:
        return f(self.value)

    def map_or_else[U](self, fallback: Thunk[U], f: Callable[[T], U], /) -> U:
        return f(self.value)

    def filter(self, predicate: Predicate[T], /) -> Optional[T]:
        """Keep the value only if it passes `predicate`."""
        return self if predicate(self.value) else Absent()

    def tap(self, effect: Effect[T], /) -> Present[T]:
        """Run `effect` on the value for observation only."""
        effect(self.value)
        return self

    # Conversion

    def to_outcome_or[E](self, err: E, /) -> Outcome[T, E]:
        from ..outcome import Success

        return Success(self.value)

    def to_outcome_or_else[E](self, err_fn: Thunk[E], /) -> Outcome[T, E]:
        from ..outcome import Success

        return Success(self.value)

    # Extraction

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str, /) -> T:
        return self.value

    def unwrap_or(self, default: T, /) -> T:
        return self.value

    def unwrap_or_else(self, f: Thunk[T], /) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@dataclass(frozen=True, slots=True)
class Absent:
    """
    Optional holding nothing.

    Carries no payload, so one class serves every `T`. Callbacks that would
    consume a value are never invoked.
    """

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    # Combination

    def and_[U](self, other: Optional[U], /) -> Absent:
        return self

    def and_then[U](self, f: Callable[[typing.Never], Optional[U]], /) -> Absent:
        return self

    def or_[T](self, other: Optional[T], /) -> Optional[T]:
        return other

    def or_else[T](self, f: Thunk[Optional[T]], /) -> Optional[T]:
        return f()

    # Functor operations

    def map[U](self, f: Callable[[typing.Never], U], /) -> Absent:
        return self

    def map_or[U](self, default: U, f: Callable[[typing.Never], U], /) -> U:
        return default

    def map_or_else[U](self, fallback: Thunk[U], f: Callable[[typing.Never], U], /) -> U:
        return fallback()

    def filter(self, predicate: Predicate[typing.Never], /) -> Absent:
        return self

    def tap(self, effect: Effect[typing.Never], /) -> Absent:
        return self

    # Conversion

    def to_outcome_or[E](self, err: E, /) -> Outcome[typing.Never, E]:
        from ..outcome import Failure

        return Failure(err)

    def to_outcome_or_else[E](self, err_fn: Thunk[E], /) -> Outcome[typing.Never, E]:
        from ..outcome import Failure

        return Failure(err_fn())

    # Extraction

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError("called unwrap() on an Absent value", variant="Absent")

    def expect(self, message: str, /) -> typing.NoReturn:
        raise UnwrapError(message, variant="Absent")

    def unwrap_or[T](self, default: T, /) -> T:
        return default

    def unwrap_or_else[T](self, f: Thunk[T], /) -> T:
        return f()

    def __repr__(self) -> str:
        return "Absent()"


type Optional[T] = Present[T] | Absent


__all__ = ("Absent", "Optional", "Present")
