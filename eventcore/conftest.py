import pytest

from eventcore.guests.models import Guest
from eventcore.notifications import InMemoryNotificationChannel


@pytest.fixture
def memory_channel() -> InMemoryNotificationChannel:
    return InMemoryNotificationChannel()


@pytest.fixture
def alice() -> Guest:
    return Guest("Alice", "alice@email.com")


@pytest.fixture
def bob() -> Guest:
    return Guest("Bob", "bob@email.com")


@pytest.fixture
def carol() -> Guest:
    return Guest("Carol", "carol@email.com")
