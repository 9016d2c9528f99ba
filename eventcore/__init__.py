"""In-memory model of events, their guest lists and guest notifications."""

from eventcore.events import (
    UNLIMITED_CAPACITY,
    CapacityExceededError,
    Event,
    EventError,
    EventType,
    HybridEvent,
    InPersonEvent,
    InvalidEventDateError,
    VirtualEvent,
)
from eventcore.guests import Guest
from eventcore.notifications import NotificationDTO

__all__ = [
    "UNLIMITED_CAPACITY",
    "CapacityExceededError",
    "Event",
    "EventError",
    "EventType",
    "Guest",
    "HybridEvent",
    "InPersonEvent",
    "InvalidEventDateError",
    "NotificationDTO",
    "VirtualEvent",
]
