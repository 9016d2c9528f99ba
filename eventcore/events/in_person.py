from eventcore.events.base import Event, EventType
from eventcore.notifications import NotificationChannel


class InPersonEvent(Event):
    """An event held at a physical venue, limited by the venue's capacity."""

    event_type = EventType.IN_PERSON
    type_label = "In-Person Event"

    def __init__(
        self,
        title: str,
        date: str,
        location: str,
        physical_capacity: int,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        super().__init__(title, date, notification_channel=notification_channel)
        self._location = location
        self._physical_capacity = physical_capacity

    @property
    def location(self) -> str:
        return self._location

    @property
    def capacity(self) -> int:
        return self._physical_capacity

    def event_details(self) -> str:
        details = self._basic_details()
        details += f"\nLocation: {self.location}"
        details += f"\nCapacity: {self.guest_count} / {self._physical_capacity}"
        return details

    def __str__(self) -> str:
        return f"{super().__str__()} at {self.location}"
