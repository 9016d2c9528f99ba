from eventcore.events.base import UNLIMITED_CAPACITY, Event, EventType
from eventcore.notifications import NotificationChannel


class VirtualEvent(Event):
    """An online event. Anyone with the meeting link can attend."""

    event_type = EventType.VIRTUAL
    type_label = "Virtual Event"

    def __init__(
        self,
        title: str,
        date: str,
        meeting_url: str,
        notification_channel: NotificationChannel | None = None,
    ) -> None:
        super().__init__(title, date, notification_channel=notification_channel)
        self._meeting_url = meeting_url

    @property
    def meeting_url(self) -> str:
        return self._meeting_url

    @property
    def capacity(self) -> int:
        return UNLIMITED_CAPACITY

    def event_details(self) -> str:
        details = self._basic_details()
        details += f"\nMeeting URL: {self.meeting_url}"
        details += f"\nRegistered: {self.guest_count} guests (No capacity limit)"
        return details

    def __str__(self) -> str:
        return f"{super().__str__()} (Virtual)"
