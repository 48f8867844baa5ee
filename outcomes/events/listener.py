"""
Listener building blocks
========================

Typed event keys, subscription options and the private listener entry.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# Listener = callback receiving the event payload, return value ignored
type Listener[T] = Callable[[T], object]

# Unsubscribe = handle returned by subscribe(), removes that registration
type Unsubscribe = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Event[T]:
    """
    Typed event key.

    Binds an event name to its payload type so a type checker can match
    listeners and payloads:

        LOGIN: Event[User] = Event("login")

        channel.subscribe(LOGIN, on_login)   # on_login(user: User)
        channel.emit(LOGIN, user)

    NOTE: `Event("login")` and the plain string "login" address the same channel.
    """

    name: str

    def __str__(self) -> str:
        return self.name


type EventKey[T] = Event[T] | str


@dataclass(frozen=True, slots=True)
class ListenerOptions:
    """Subscription options. `once` removes the listener before its first call."""

    once: bool = False


@dataclass(eq=False, slots=True)
class ListenerEntry[T]:
    """One registration: the callback plus its fire-once flag. Compared by identity."""

    listener: Listener[T]
    once: bool = False


def event_name(event: Event[object] | str) -> str:
    """Channel name of a typed key or plain string."""
    if isinstance(event, Event):
        return event.name
    return event


__all__ = (
    "Event",
    "EventKey",
    "Listener",
    "ListenerOptions",
    "Unsubscribe",
)
