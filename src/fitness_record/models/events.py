"""Event log of changes made to a logbook."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """A single recorded change."""

    description: str
    logged_at: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.logged_at.strftime('%Y-%m-%d %H:%M:%S')}  {self.description}"


class EventLog:
    """Ordered record of events, oldest first."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def log_event(self, description: str) -> Event:
        """Record an event and return it."""
        event = Event(description)
        self._events.append(event)
        return event

    def clear(self) -> None:
        """Forget all recorded events."""
        self._events.clear()

    def __iter__(self):
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
