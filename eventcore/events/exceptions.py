class EventError(Exception):
    """Base class for errors raised by the event model."""


class CapacityExceededError(EventError):
    """Raised when adding a guest to an event that is already full."""

    def __init__(self, title: str, capacity: int) -> None:
        self.title = title
        self.capacity = capacity
        super().__init__(f"Cannot add guest. Event '{title}' is full!")


class InvalidEventDateError(EventError):
    """Reserved for rejecting unusable event dates.

    Dates are free text and nothing in the model raises this yet.
    """

    def __init__(self, date: str) -> None:
        self.date = date
        super().__init__(f"Invalid event date: '{date}'")
