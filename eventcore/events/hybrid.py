from eventcore.events.base import Event, EventType
from eventcore.notifications import NotificationChannel


class HybridEvent(Event):
    """An event with both a venue and a meeting link.

    Only in-person attendance is counted against `physical_capacity`; the
    virtual side has no limit.
    """

    event_type = EventType.HYBRID
    type_label = "Hybrid Event (In-Person & Virtual)"

    def __init__(
        self,
        title: str,
        date: str,
        location: str,
        meeting_url: str,
        physical_capacity: int,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        super().__init__(title, date, notification_channel=notification_channel)
        self._location = location
        self._meeting_url = meeting_url
        self._physical_capacity = physical_capacity

    @property
    def location(self) -> str:
        return self._location

    @property
    def meeting_url(self) -> str:
        return self._meeting_url

    @property
    def capacity(self) -> int:
        return self._physical_capacity

    def event_details(self) -> str:
        details = self._basic_details()
        details += f"\nPhysical Location: {self.location}"
        details += f"\nVirtual URL: {self.meeting_url}"
        details += f"\nIn-Person Capacity: {self.guest_count} / {self._physical_capacity}"
        details += "\nNote: Virtual attendance is unlimited"
        return details

    def __str__(self) -> str:
        return f"{super().__str__()} (Hybrid: {self.location} & Online)"
