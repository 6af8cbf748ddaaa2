"""Data models for fitness-record."""

from .events import Event, EventLog
from .exercises import Exercise, Muscle
from .logbook import Logbook
from .session import WorkoutSession

__all__ = [
    "Event",
    "EventLog",
    "Exercise",
    "Logbook",
    "Muscle",
    "WorkoutSession",
]
