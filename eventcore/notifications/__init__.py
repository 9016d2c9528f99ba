from eventcore.config.settings import settings
from eventcore.notifications.base import Communicable, NotificationChannel
from eventcore.notifications.channels import (
    ConsoleNotificationChannel,
    InMemoryNotificationChannel,
    LoggingNotificationChannel,
)
from eventcore.notifications.dtos import NotificationDTO

_CHANNELS: dict[str, type[NotificationChannel]] = {
    "console": ConsoleNotificationChannel,
    "logging": LoggingNotificationChannel,
    "memory": InMemoryNotificationChannel,
}


def get_notification_channel() -> NotificationChannel:
    channel_cls = _CHANNELS.get(settings.notification_channel.lower())
    if channel_cls is None:
        raise ValueError(
            f"Unknown notification channel '{settings.notification_channel}', "
            f"expected one of: {', '.join(sorted(_CHANNELS))}"
        )
    return channel_cls()


__all__ = [
    "Communicable",
    "ConsoleNotificationChannel",
    "InMemoryNotificationChannel",
    "LoggingNotificationChannel",
    "NotificationChannel",
    "NotificationDTO",
    "get_notification_channel",
]
