from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationDTO:
    """A broadcast of one message to every guest of an event."""

    event_title: str
    message: str
    recipients: tuple[str, ...] = ()

    @property
    def recipient_count(self) -> int:
        return len(self.recipients)

    def render(self) -> str:
        lines = [
            f"--- Sending Notification for: {self.event_title} ---",
            f"Message: {self.message}",
            f"Sending to {self.recipient_count} guest(s):",
        ]
        lines.extend(f"  -> {address}" for address in self.recipients)
        return "\n".join(lines)
