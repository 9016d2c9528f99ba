from abc import ABC, abstractmethod

from eventcore.notifications.dtos import NotificationDTO


class Communicable(ABC):
    """Anything that can broadcast a message to the people it holds."""

    @abstractmethod
    def send_notification(self, message: str) -> NotificationDTO:
        pass


class NotificationChannel(ABC):
    """Where a finished broadcast ends up.

    Delivery is simulated: channels never report failures back to the sender.
    """

    @abstractmethod
    def deliver(self, notification: NotificationDTO) -> None:
        pass
