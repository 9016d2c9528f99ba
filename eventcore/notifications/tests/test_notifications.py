"""Tests for event notification broadcasts and channels."""

import logging

import pytest

from eventcore.config.settings import settings
from eventcore.events.in_person import InPersonEvent
from eventcore.events.virtual import VirtualEvent
from eventcore.notifications import (
    ConsoleNotificationChannel,
    InMemoryNotificationChannel,
    LoggingNotificationChannel,
    NotificationDTO,
    get_notification_channel,
)


def test_send_notification_reaches_every_guest_in_order(memory_channel, alice, bob, carol):
    event = InPersonEvent("Board Meeting", "July 1, 2025", "Room 4", 10, notification_channel=memory_channel)
    for guest in (alice, bob, carol):
        event.add_guest(guest)

    notification = event.send_notification("Reminder")

    assert notification.recipients == ("alice@email.com", "bob@email.com", "carol@email.com")
    assert memory_channel.sent_notifications == [notification]
    address_lines = [line for line in notification.render().splitlines() if line.startswith("  -> ")]
    assert address_lines == [
        "  -> alice@email.com",
        "  -> bob@email.com",
        "  -> carol@email.com",
    ]


def test_send_notification_ignores_capacity(memory_channel, alice, bob, carol):
    event = VirtualEvent("Webinar", "July 2, 2025", "https://meet.example/x", notification_channel=memory_channel)
    for guest in (alice, bob, carol):
        event.add_guest(guest)

    notification = event.send_notification("Reminder")
    assert notification.recipient_count == 3


def test_send_notification_without_guests(memory_channel):
    event = InPersonEvent("Empty Room", "July 3, 2025", "Room 5", 10, notification_channel=memory_channel)

    notification = event.send_notification("Anyone?")

    assert notification.recipients == ()
    assert notification.render() == (
        "--- Sending Notification for: Empty Room ---\n"
        "Message: Anyone?\n"
        "Sending to 0 guest(s):"
    )
    assert len(memory_channel.sent_notifications) == 1


def test_render():
    notification = NotificationDTO(
        event_title="Gala",
        message="Doors open at 7",
        recipients=("a@example.com", "b@example.com"),
    )

    assert notification.render() == (
        "--- Sending Notification for: Gala ---\n"
        "Message: Doors open at 7\n"
        "Sending to 2 guest(s):\n"
        "  -> a@example.com\n"
        "  -> b@example.com"
    )


def test_console_channel_prints(capsys):
    notification = NotificationDTO(event_title="Gala", message="Hi", recipients=("a@example.com",))

    ConsoleNotificationChannel().deliver(notification)

    assert capsys.readouterr().out == notification.render() + "\n"


def test_logging_channel_logs_each_recipient(caplog):
    notification = NotificationDTO(
        event_title="Gala",
        message="Hi",
        recipients=("a@example.com", "b@example.com"),
    )

    with caplog.at_level(logging.INFO, logger="eventcore.notifications.channels"):
        LoggingNotificationChannel().deliver(notification)

    messages = [r.getMessage() for r in caplog.records if r.name == "eventcore.notifications.channels"]
    assert messages == [
        "Notification for 'Gala' to a@example.com: Hi",
        "Notification for 'Gala' to b@example.com: Hi",
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("console", ConsoleNotificationChannel),
        ("logging", LoggingNotificationChannel),
        ("memory", InMemoryNotificationChannel),
        ("MEMORY", InMemoryNotificationChannel),
    ],
)
def test_get_notification_channel(monkeypatch, name, expected):
    monkeypatch.setattr(settings, "notification_channel", name)
    assert isinstance(get_notification_channel(), expected)


def test_get_notification_channel_unknown(monkeypatch):
    monkeypatch.setattr(settings, "notification_channel", "carrier-pigeon")
    with pytest.raises(ValueError, match="carrier-pigeon"):
        get_notification_channel()


def test_event_without_channel_uses_configured_one(monkeypatch, capsys, alice):
    monkeypatch.setattr(settings, "notification_channel", "console")
    event = InPersonEvent("Picnic", "Aug 1, 2025", "Park", 10)
    event.add_guest(alice)

    event.send_notification("Bring a hat")

    out = capsys.readouterr().out
    assert "--- Sending Notification for: Picnic ---" in out
    assert "  -> alice@email.com" in out


def test_configured_memory_channel_keeps_broadcasts(monkeypatch, alice, bob):
    """Test that an event without an explicit channel keeps using the configured one."""
    monkeypatch.setattr(settings, "notification_channel", "memory")
    event = InPersonEvent("Picnic", "Aug 1, 2025", "Park", 10)
    event.add_guest(alice)
    event.add_guest(bob)

    first = event.send_notification("Bring a hat")
    second = event.send_notification("Bring sunscreen")

    assert isinstance(event.notification_channel, InMemoryNotificationChannel)
    assert event.notification_channel.sent_notifications == [first, second]
    assert event.notification_channel.sent_addresses == [
        "alice@email.com",
        "bob@email.com",
        "alice@email.com",
        "bob@email.com",
    ]


def test_explicit_channel_is_kept(memory_channel):
    event = VirtualEvent("Webinar", "July 2, 2025", "https://meet.example/x", notification_channel=memory_channel)
    assert event.notification_channel is memory_channel


def test_unknown_channel_fails_at_event_creation(monkeypatch):
    monkeypatch.setattr(settings, "notification_channel", "carrier-pigeon")
    with pytest.raises(ValueError, match="carrier-pigeon"):
        InPersonEvent("Picnic", "Aug 1, 2025", "Park", 10)
