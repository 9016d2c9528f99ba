from dataclasses import dataclass


@dataclass
class Guest:
    """An attendee record held by a single event's guest list."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"Guest: {self.name} ({self.email})"
