"""
Outcome - result of a computation that can fail
===============================================

Two variants:
- Success(value): the computation produced a value
- Failure(error): the computation failed with `error`

`error` is any object, not necessarily an exception. Operations that don't
apply to a variant return it unchanged (the very same object).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import UnwrapError
from .._types import Effect

if typing.TYPE_CHECKING:
    from ..optional import Optional


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Outcome holding a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    # Monad operations

    def and_[U, E](self, res: Outcome[U, E], /) -> Outcome[U, E]:
        return res

    def and_then[U, E](self, f: Callable[[T], Outcome[U, E]], /) -> Outcome[U, E]:
        """
        Monadic bind (>>=).

        - On Success: returns f(value)
        - On Failure: short-circuit, f is never called
        """
        return f(self.value)

    def or_[E](self, res: Outcome[T, E], /) -> Success[T]:
        return self

    def or_else[F](self, f: Callable[[typing.Never], Outcome[T, F]], /) -> Success[T]:
        return self

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Success[U]:
        return Success(f(self.value))

    def map_err[F](self, f: Callable[[typing.Never], F], /) -> Success[T]:
        return self

    def map_or[U](self, default: U, f: Callable[[T], U], /) -> U:
        return f(self.value)

    def map_or_else[U](self, fallback: Callable[[typing.Never], U], f: Callable[[T], U], /) -> U:
        return f(self.value)

    def tap(self, effect: Effect[T], /) -> Success[T]:
        effect(self.value)
        return self

    def tap_err(self, effect: Effect[typing.Never], /) -> Success[T]:
        return self

    # Conversion

    def to_optional(self) -> Optional[T]:
        from ..optional import Present

        return Present(self.value)

    def error_to_optional(self) -> Optional[typing.Never]:
        from ..optional import Absent

        return Absent()

    # Extraction

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str, /) -> T:
        return self.value

    def unwrap_err(self) -> typing.NoReturn:
        raise UnwrapError(
            f"called unwrap_err() on a Success value: {self.value!r}",
            variant="Success",
            payload=self.value,
        )

    def unwrap_or(self, default: T, /) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[typing.Never], T], /) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Outcome holding an error."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    # Monad operations

    def and_[U](self, res: Outcome[U, E], /) -> Failure[E]:
        return self

    def and_then[U](self, f: Callable[[typing.Never], Outcome[U, E]], /) -> Failure[E]:
        return self

    def or_[T](self, res: Outcome[T, E], /) -> Outcome[T, E]:
        return res

    def or_else[T, F](self, f: Callable[[E], Outcome[T, F]], /) -> Outcome[T, F]:
        """Recover: hand the error to `f`, which decides the new outcome."""
        return f(self.error)

    # Functor operations

    def map[U](self, f: Callable[[typing.Never], U], /) -> Failure[E]:
        return self

    def map_err[F](self, f: Callable[[E], F], /) -> Failure[F]:
        return Failure(f(self.error))

    def map_or[U](self, default: U, f: Callable[[typing.Never], U], /) -> U:
        return default

    def map_or_else[U](self, fallback: Callable[[E], U], f: Callable[[typing.Never], U], /) -> U:
        return fallback(self.error)

    def tap(self, effect: Effect[typing.Never], /) -> Failure[E]:
        return self

    def tap_err(self, effect: Effect[E], /) -> Failure[E]:
        effect(self.error)
        return self

    # Conversion

    def to_optional(self) -> Optional[typing.Never]:
        from ..optional import Absent

        return Absent()

    def error_to_optional(self) -> Optional[E]:
        from ..optional import Present

        return Present(self.error)

    # Extraction

    def unwrap(self) -> typing.NoReturn:
        self._raise(f"called unwrap() on a Failure value: {self.error!r}")

    def expect(self, message: str, /) -> typing.NoReturn:
        self._raise(message)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[T](self, default: T, /) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T], /) -> T:
        return f(self.error)

    def _raise(self, message: str) -> typing.NoReturn:
        exc = UnwrapError(message, variant="Failure", payload=self.error)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Outcome[T, E] = Success[T] | Failure[E]


__all__ = ("Failure", "Outcome", "Success")
