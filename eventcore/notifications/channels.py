import logging

from eventcore.notifications.base import NotificationChannel
from eventcore.notifications.dtos import NotificationDTO

logger = logging.getLogger(__name__)


class ConsoleNotificationChannel(NotificationChannel):
    """Prints the broadcast to stdout."""

    def deliver(self, notification: NotificationDTO) -> None:
        print(notification.render())


class LoggingNotificationChannel(NotificationChannel):
    """Writes one log record per recipient."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def deliver(self, notification: NotificationDTO) -> None:
        for address in notification.recipients:
            logger.log(
                self.level,
                f"Notification for '{notification.event_title}' to {address}: {notification.message}",
            )


class InMemoryNotificationChannel(NotificationChannel):
    """Keeps delivered notifications instead of sending them."""

    def __init__(self) -> None:
        self.sent_notifications: list[NotificationDTO] = []

    def deliver(self, notification: NotificationDTO) -> None:
        self.sent_notifications.append(notification)

    @property
    def sent_addresses(self) -> list[str]:
        return [address for n in self.sent_notifications for address in n.recipients]
