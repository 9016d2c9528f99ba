"""Abstract event with a capacity-bounded guest list.

Concrete events only decide their capacity and how their details read; adding
guests, listing them and broadcasting notifications is shared here.
"""

import logging
import sys
from abc import abstractmethod
from enum import Enum

from eventcore.config.settings import settings
from eventcore.events.exceptions import CapacityExceededError
from eventcore.guests.models import Guest
from eventcore.notifications import (
    Communicable,
    NotificationChannel,
    NotificationDTO,
    get_notification_channel,
)

logger = logging.getLogger(__name__)

# Capacity of events with no attendance limit
UNLIMITED_CAPACITY = sys.maxsize


class EventType(str, Enum):
    IN_PERSON = "in_person"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"


class Event(Communicable):
    """Base class for all event types."""

    event_type: EventType | None = None
    type_label: str = "Event"

    def __init__(
        self,
        title: str,
        date: str,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        self._title = title
        self._date = date
        self._guests: list[Guest] = []
        self._guest_count = 0
        self._default_capacity = settings.default_event_capacity
        self._notification_channel = notification_channel or get_notification_channel()

    @property
    def title(self) -> str:
        return self._title

    @property
    def date(self) -> str:
        return self._date

    @property
    def notification_channel(self) -> NotificationChannel:
        return self._notification_channel

    @property
    def guests(self) -> tuple[Guest, ...]:
        return tuple(self._guests)

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def capacity(self) -> int:
        return self._default_capacity

    @abstractmethod
    def event_details(self) -> str:
        """Multi-line description of the event, starting with its type, title and date."""
        pass

    def _basic_details(self) -> str:
        return f"Type: {self.type_label}\nTitle: {self.title}\nDate: {self.date}"

    def add_guest(self, guest: Guest) -> None:
        """Append a guest to the list.

        Raises:
            CapacityExceededError: the event already holds `capacity` guests.
                The guest list is left untouched.
        """
        capacity = self.capacity
        if self._guest_count >= capacity:
            logger.warning(f"Rejected {guest}: '{self.title}' is full ({capacity})")
            raise CapacityExceededError(self.title, capacity)
        self._guests.append(guest)
        self._guest_count += 1
        logger.debug(f"Added {guest} to '{self.title}' ({self._guest_count}/{capacity})")

    def display_guest_list(self) -> str:
        lines = [f"=== Guest List for: {self.title} ==="]
        if self._guest_count == 0:
            lines.append("No guests registered yet.")
        else:
            lines.extend(f"{i}. {guest}" for i, guest in enumerate(self._guests, start=1))
        lines.append(f"Total Guests: {self._guest_count} / {self.capacity}")
        return "\n".join(lines)

    def send_notification(self, message: str) -> NotificationDTO:
        """Broadcast `message` to every guest's email, in the order they were added."""
        notification = NotificationDTO(
            event_title=self.title,
            message=message,
            recipients=tuple(guest.email for guest in self._guests),
        )
        self._notification_channel.deliver(notification)
        logger.info(f"Sent notification for '{self.title}' to {notification.recipient_count} guest(s)")
        return notification

    def __str__(self) -> str:
        return f"Event: {self.title} on {self.date} ({self._guest_count} guests)"

    def __repr__(self) -> str:
        kind = f" [{self.event_type.value}]" if self.event_type else ""
        return f"<{type(self).__name__} {self.title!r} on {self.date}{kind}>"
