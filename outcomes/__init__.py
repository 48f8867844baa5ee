"""
Outcomes: fluent sum types and a typed event channel.

Building blocks for composing computations that may be absent or may fail,
plus a small synchronous pub/sub channel.

Architecture:
- Optional = Present(value) | Absent()
- Outcome = Success(value) | Failure(error), interconvertible with Optional
- EventChannel - named events, once-listeners, unsubscribe handles
- lift - bridges to nullable values, exceptions and kungfu types
"""

# Core types
from ._types import Effect, NoError, Predicate, Thunk

# Optional
from .optional import Absent, Optional, Present

# Outcome
from .outcome import Failure, Outcome, Success

# Events
from .events import Event, EventChannel, EventKey, Listener, ListenerOptions, Unsubscribe

# Collection operations
from .collection import collect_present, partition, sequence, traverse

# Lift helpers
from . import lift
from .lift import catching, from_nullable

# Errors
from ._errors import UnwrapError

__all__ = (
    # Types
    "Effect",
    "NoError",
    "Predicate",
    "Thunk",
    # Optional
    "Absent",
    "Optional",
    "Present",
    # Outcome
    "Failure",
    "Outcome",
    "Success",
    # Events
    "Event",
    "EventChannel",
    "EventKey",
    "Listener",
    "ListenerOptions",
    "Unsubscribe",
    # Collection
    "collect_present",
    "partition",
    "sequence",
    "traverse",
    # Lift module (namespace import - preferred)
    "lift",
    "catching",
    "from_nullable",
    # Errors
    "UnwrapError",
)
