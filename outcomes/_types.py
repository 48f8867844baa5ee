"""
Core type definitions for outcomes.

Aliases shared by the algebraic types, the collection helpers and the event channel.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-arg callable producing a value on demand
type Thunk[T] = Callable[[], T]

# Effect = observation-only callback, its return value is ignored
type Effect[T] = Callable[[T], object]

# NoError = error type of an Outcome that can never fail
# NOTE: Never (bottom type) rather than None: a NoError value cannot exist.
type NoError = typing.Never

__all__ = (
    "Effect",
    "NoError",
    "Predicate",
    "Thunk",
)
