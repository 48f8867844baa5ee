from __future__ import annotations

import typing


class UnwrapError(RuntimeError):
    """unwrap() was called on the wrong variant. Signals misuse, not a recoverable failure."""

    variant: str
    payload: typing.Any

    def __init__(self, message: str, *, variant: str, payload: typing.Any = None) -> None:
        self.variant = variant
        self.payload = payload
        super().__init__(message)


__all__ = ("UnwrapError",)
