"""
Event channel
=============

Named synchronous pub/sub with one-shot listeners and unsubscribe handles.
"""

from .channel import EventChannel
from .listener import Event, EventKey, Listener, ListenerOptions, Unsubscribe

__all__ = (
    "Event",
    "EventChannel",
    "EventKey",
    "Listener",
    "ListenerOptions",
    "Unsubscribe",
)
