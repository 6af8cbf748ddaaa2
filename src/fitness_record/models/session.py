"""Workout sessions: the exercises logged on one date."""

from dataclasses import dataclass, field

from ..errors import ParseError
from .exercises import Exercise, Muscle, require_field

DATE_KEY = "date"
EXERCISES_KEY = "exercises"


@dataclass
class WorkoutSession:
    """An ordered group of exercises logged under one date string.

    The date is free-form text (``yyyy/mm/dd`` by convention) and is never
    validated. Exercises keep insertion order and duplicate names are
    allowed.
    """

    date: str
    _exercises: list[Exercise] = field(default_factory=list, init=False)

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        """Snapshot of the exercises in insertion order."""
        return tuple(self._exercises)

    def add_exercise(self, exercise: Exercise) -> None:
        """Append an exercise to the end of the session."""
        self._exercises.append(exercise)

    def remove_exercise(self, name: str) -> bool:
        """Remove the first exercise whose name matches, ignoring case.

        Returns:
            True if an exercise was removed, False if none matched
        """
        for index, exercise in enumerate(self._exercises):
            if exercise.matches(name):
                del self._exercises[index]
                return True
        return False

    def find_exercise(self, name: str) -> Exercise | None:
        """Return the first exercise whose name matches, ignoring case."""
        for exercise in self._exercises:
            if exercise.matches(name):
                return exercise
        return None

    def has_muscle(self, muscle: Muscle) -> bool:
        """Check whether any exercise in the session targets the muscle."""
        return any(exercise.muscle == muscle for exercise in self._exercises)

    def is_rest_day(self) -> bool:
        """A session with no exercises left in it."""
        return not self._exercises

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            DATE_KEY: self.date,
            EXERCISES_KEY: [exercise.to_dict() for exercise in self._exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSession":
        """Create from dictionary.

        Raises:
            ParseError: If the record or any of its exercises is malformed.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Session record must be an object, got {type(data).__name__}")

        session = cls(date=require_field(data, DATE_KEY, str))
        for exercise_data in require_field(data, EXERCISES_KEY, list):
            session.add_exercise(Exercise.from_dict(exercise_data))
        return session
