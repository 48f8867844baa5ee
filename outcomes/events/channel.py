"""
EventChannel - synchronous named pub/sub
========================================

Listeners are kept per event name in registration order and run on the
caller's thread when the event is emitted.

Dispatch policy:
- emit() walks a snapshot taken when it starts, so every listener registered
  at that moment runs even if it gets removed mid-dispatch
- listeners added during dispatch wait for the next emit()
- a once-listener is claimed (removed) before it runs; an emit() that can't
  claim it skips it, so it runs at most once even under re-entrant emits
- a listener exception is not caught: it reaches the emit() caller and the
  remaining listeners of that call don't run
"""

from __future__ import annotations

import logging
import threading
import typing

from .listener import (
    Event,
    EventKey,
    Listener,
    ListenerEntry,
    ListenerOptions,
    Unsubscribe,
    event_name,
)

logger = logging.getLogger(__name__)


class EventChannel[EventMap]:
    """
    Mapping from event names to ordered listener lists.

    `EventMap` names the set of events the channel carries (a TypedDict or a
    class of `Event` constants). Typed `Event[T]` keys are checked against
    listener and payload types; plain string keys are accepted as-is.

    The table is guarded by a lock that is held only while it is read or
    mutated, never while a listener runs, so listeners may freely call back
    into the channel.
    """

    __slots__ = ("_listeners", "_lock")

    def __init__(self) -> None:
        self._listeners: dict[str, list[ListenerEntry[typing.Any]]] = {}
        self._lock = threading.Lock()

    # Subscription

    @typing.overload
    def subscribe[T](
        self,
        event: Event[T],
        listener: Listener[T],
        /,
        *,
        once: bool = ...,
        options: ListenerOptions | None = ...,
    ) -> Unsubscribe: ...

    @typing.overload
    def subscribe(
        self,
        event: str,
        listener: Listener[typing.Any],
        /,
        *,
        once: bool = ...,
        options: ListenerOptions | None = ...,
    ) -> Unsubscribe: ...

    def subscribe(
        self,
        event: EventKey[typing.Any],
        listener: Listener[typing.Any],
        /,
        *,
        once: bool = False,
        options: ListenerOptions | None = None,
    ) -> Unsubscribe:
        """
        Register `listener` for `event` and return its unsubscribe handle.

        The handle removes exactly this registration and is a no-op once the
        registration is gone (already called, unsubscribed, cleared or fired
        as a once-listener).

        Example:
            stop = channel.subscribe("login", on_login)
            channel.emit("login", {"id": 1})   # on_login({"id": 1})
            stop()
        """
        if options is not None:
            once = once or options.once

        name = event_name(event)
        entry = ListenerEntry(listener, once=once)
        with self._lock:
            self._listeners.setdefault(name, []).append(entry)
        logger.debug("subscribed to %r (once=%s)", name, once)

        def unsubscribe() -> None:
            if self._discard(name, entry):
                logger.debug("unsubscribed from %r via handle", name)

        return unsubscribe

    @typing.overload
    def subscribe_once[T](self, event: Event[T], listener: Listener[T], /) -> Unsubscribe: ...

    @typing.overload
    def subscribe_once(self, event: str, listener: Listener[typing.Any], /) -> Unsubscribe: ...

    def subscribe_once(
        self,
        event: EventKey[typing.Any],
        listener: Listener[typing.Any],
        /,
    ) -> Unsubscribe:
        """Register `listener` for the next `event` only."""
        return self.subscribe(event, listener, once=True)

    @typing.overload
    def unsubscribe[T](self, event: Event[T], listener: Listener[T], /) -> None: ...

    @typing.overload
    def unsubscribe(self, event: str, listener: Listener[typing.Any], /) -> None: ...

    def unsubscribe(
        self,
        event: EventKey[typing.Any],
        listener: Listener[typing.Any],
        /,
    ) -> None:
        """
        Remove the first registration of `listener` for `event`.

        Matches by equality, so a bound method passed again (`obj.handler`)
        finds its earlier registration. Unknown events and listeners are a no-op.
        """
        name = event_name(event)
        with self._lock:
            entries = tuple(self._listeners.get(name, ()))

        # Listener __eq__ is user code: compare outside the lock
        for entry in entries:
            if entry.listener == listener and self._discard(name, entry):
                logger.debug("unsubscribed from %r", name)
                return

    def clear(self, event: EventKey[typing.Any] | None = None, /) -> None:
        """Drop the listeners of `event`, or of every event when omitted."""
        with self._lock:
            if event is None:
                dropped = sum(len(entries) for entries in self._listeners.values())
                self._listeners.clear()
                name = None
            else:
                name = event_name(event)
                dropped = len(self._listeners.pop(name, ()))
        logger.debug("cleared %d listener(s) from %s", dropped, "all events" if name is None else repr(name))

    # Dispatch

    @typing.overload
    def emit[T](self, event: Event[T], payload: T, /) -> None: ...

    @typing.overload
    def emit(self, event: str, payload: typing.Any, /) -> None: ...

    def emit(self, event: EventKey[typing.Any], payload: typing.Any, /) -> None:
        """Call every listener of `event` with `payload`, in registration order."""
        name = event_name(event)
        with self._lock:
            snapshot = tuple(self._listeners.get(name, ()))
        logger.debug("emitting %r to %d listener(s)", name, len(snapshot))

        for entry in snapshot:
            if entry.once:
                if not self._discard(name, entry):
                    continue
                logger.debug("claimed once-listener of %r", name)
            entry.listener(payload)

    # Introspection

    def listener_count(self, event: EventKey[typing.Any], /) -> int:
        with self._lock:
            return len(self._listeners.get(event_name(event), ()))

    def event_names(self) -> tuple[str, ...]:
        """Names of events with at least one listener, in channel creation order."""
        with self._lock:
            return tuple(self._listeners)

    # Event-emitter vocabulary
    on = subscribe
    once = subscribe_once
    off = unsubscribe

    def _discard(self, name: str, entry: ListenerEntry[typing.Any]) -> bool:
        """Remove this exact entry. False if it was already gone."""
        with self._lock:
            entries = self._listeners.get(name)
            if not entries:
                return False
            for index, candidate in enumerate(entries):
                if candidate is entry:
                    del entries[index]
                    break
            else:
                return False
            if not entries:
                del self._listeners[name]
        return True

    def __repr__(self) -> str:
        with self._lock:
            counts = ", ".join(f"{name!r}: {len(entries)}" for name, entries in self._listeners.items())
        return f"EventChannel({{{counts}}})"


__all__ = ("EventChannel",)
