from .base import UNLIMITED_CAPACITY, Event, EventType
from .exceptions import CapacityExceededError, EventError, InvalidEventDateError
from .hybrid import HybridEvent
from .in_person import InPersonEvent
from .virtual import VirtualEvent

__all__ = [
    "UNLIMITED_CAPACITY",
    "CapacityExceededError",
    "Event",
    "EventError",
    "EventType",
    "HybridEvent",
    "InPersonEvent",
    "InvalidEventDateError",
    "VirtualEvent",
]
