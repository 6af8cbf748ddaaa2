"""Validation of raw user input before it reaches the logbook.

Each operation builds its own form from the text it was given. Problems
are collected in a ``FormResult`` rather than raised, so callers can show
every message at once.
"""

from dataclasses import dataclass, field
from datetime import date as dt_date
from typing import Generic, TypeVar

from ..models import Exercise, Muscle

T = TypeVar("T")

DATE_FORMAT = "%Y/%m/%d"


@dataclass
class FormResult(Generic[T]):
    """Outcome of validating a form: a value or a list of errors."""

    value: T | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class ExerciseForm:
    """Raw text entered for a new exercise."""

    name: str
    muscle: str
    weight: str = "0"
    reps: str = "0"
    sets: str = "0"

    def validate(self) -> FormResult[Exercise]:
        """Convert the raw fields into an Exercise."""
        errors: list[str] = []

        name = self.name.strip()
        if not name:
            errors.append("Exercise name is required")

        muscle = parse_muscle(self.muscle)
        if muscle is None:
            errors.append(f"Unknown muscle type: {self.muscle}")

        numbers = {}
        for label, raw in (("weight", self.weight), ("reps", self.reps), ("sets", self.sets)):
            number = parse_count(raw)
            if number is None:
                errors.append(f"Please enter a valid whole number for {label}")
            numbers[label] = number

        if errors:
            return FormResult(errors=errors)
        return FormResult(value=Exercise(name=name, muscle=muscle, **numbers))


@dataclass
class DateForm:
    """Raw year, month and day entered for a session date."""

    year: str
    month: str
    day: str

    def validate(self) -> FormResult[str]:
        """Join the parts into a ``yyyy/mm/dd`` string.

        Only emptiness and embedded slashes are rejected; the parts are
        not checked against the calendar.
        """
        errors = []
        for label, part in (("year", self.year), ("month", self.month), ("day", self.day)):
            part = part.strip()
            if not part:
                errors.append(f"Please enter a {label}")
            elif "/" in part:
                errors.append(f"The {label} must not contain '/'")
        if errors:
            return FormResult(errors=errors)
        return FormResult(value=format_date(self.year.strip(), self.month.strip(), self.day.strip()))

    @classmethod
    def from_text(cls, text: str) -> "DateForm":
        """Split ``yyyy/mm/dd`` text into its parts."""
        parts = text.strip().split("/")
        if len(parts) != 3:
            return cls(year=text.strip(), month="", day="")
        return cls(*parts)


def format_date(year: str, month: str, day: str) -> str:
    """Build a session date string."""
    return f"{year}/{month}/{day}"


def today() -> str:
    """Today's date as a session date string."""
    return dt_date.today().strftime(DATE_FORMAT)


def parse_count(raw: str) -> int | None:
    """Parse a non-negative whole number, or return None."""
    try:
        value = int(raw.strip())
    except (ValueError, AttributeError):
        return None
    if value < 0:
        return None
    return value


def parse_muscle(raw: str) -> Muscle | None:
    """Parse a muscle group name, ignoring case."""
    label = raw.strip().upper()
    for muscle in Muscle:
        if muscle.value == label:
            return muscle
    return None
