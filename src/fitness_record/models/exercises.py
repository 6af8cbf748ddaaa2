"""Exercise records and muscle groups."""

from dataclasses import dataclass
from enum import Enum

from ..errors import ParseError

# Keys used in the saved logbook file
NAME_KEY = "exercise name"
MUSCLE_KEY = "muscle type"
WEIGHT_KEY = "weight"
SETS_KEY = "sets"
REPS_KEY = "reps"


class Muscle(str, Enum):
    """Muscle groups an exercise can target."""

    CHEST = "CHEST"
    BACK = "BACK"
    LEGS = "LEGS"
    SHOULDERS = "SHOULDERS"
    BICEPS = "BICEPS"
    TRICEPS = "TRICEPS"
    ABS = "ABS"

    @classmethod
    def from_label(cls, label: str) -> "Muscle":
        """Look up a muscle group by its stored label.

        Raises:
            ParseError: If the label is not one of the known groups.
        """
        for muscle in cls:
            if muscle.value == label:
                return muscle
        raise ParseError(f"Unknown muscle type: {label!r}")

    def get_display_name(self) -> str:
        """Get a human-readable name."""
        return self.value.capitalize()


def normalize_exercise_name(name: str) -> str:
    """Uppercase the first character and lowercase the rest.

    An empty name is returned unchanged.
    """
    if not name:
        return name
    return name[0].upper() + name[1:].lower()


@dataclass
class Exercise:
    """A logged movement with its weight (kg), reps and sets.

    The name is normalized on every assignment, so ``exercise.name = "bench
    PRESS"`` stores ``"Bench press"``. Numeric fields are not validated.
    """

    name: str
    muscle: Muscle
    weight: int = 0
    reps: int = 0
    sets: int = 0

    def __setattr__(self, key, value):
        if key == "name":
            value = normalize_exercise_name(value)
        super().__setattr__(key, value)

    def matches(self, name: str) -> bool:
        """Check whether this exercise has the given name, ignoring case."""
        return self.name.lower() == name.lower()

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            NAME_KEY: self.name,
            MUSCLE_KEY: self.muscle.value,
            WEIGHT_KEY: self.weight,
            SETS_KEY: self.sets,
            REPS_KEY: self.reps,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary.

        Raises:
            ParseError: If a key is missing, a field has the wrong type, or
                the muscle label is unknown.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Exercise record must be an object, got {type(data).__name__}")

        name = require_field(data, NAME_KEY, str)
        muscle = Muscle.from_label(require_field(data, MUSCLE_KEY, str))

        return cls(
            name=name,
            muscle=muscle,
            weight=require_field(data, WEIGHT_KEY, int),
            reps=require_field(data, REPS_KEY, int),
            sets=require_field(data, SETS_KEY, int),
        )

    def get_summary(self) -> str:
        """Get a one-line summary."""
        return (
            f"{self.name} ({self.muscle.get_display_name()}): "
            f"{self.weight} kg, {self.reps} reps x {self.sets} sets"
        )


def require_field(data: dict, key: str, expected: type):
    """Fetch a required key and check its JSON type."""
    if key not in data:
        raise ParseError(f"Missing required field {key!r}")
    value = data[key]
    # bool is an int subclass; JSON true/false is not a count
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ParseError(
            f"Field {key!r} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
