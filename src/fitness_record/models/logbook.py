"""The logbook: every workout session plus the file it is saved to."""

import logging
from pathlib import Path

from ..errors import ReadError
from ..persistence import json_codec
from .events import EventLog
from .exercises import Exercise, Muscle
from .session import WorkoutSession

logger = logging.getLogger(__name__)


class Logbook:
    """Ordered collection of workout sessions bound to a JSON file.

    Dates are not required to be unique. Lookup by date returns the first
    session added with that date; later sessions sharing the date only show
    up in ``filter_sessions_by_date`` and the muscle queries.
    """

    def __init__(self, file_path: Path | str):
        self.file_path = Path(file_path)
        self.events = EventLog()
        self._sessions: list[WorkoutSession] = []
        self._persisted_state: list[dict] | None = None

    @property
    def sessions(self) -> tuple[WorkoutSession, ...]:
        """Snapshot of all sessions in insertion order."""
        return tuple(self._sessions)

    @property
    def is_persisted(self) -> bool:
        """True if the sessions match what was last saved or loaded."""
        return self._persisted_state == json_codec.encode_sessions(self._sessions)

    def add_session(self, session: WorkoutSession) -> None:
        """Append a session. Sessions with an existing date are still added."""
        self._sessions.append(session)
        self.events.log_event(f"Added workout session for {session.date}")

    def get_session_by_date(self, date: str) -> WorkoutSession | None:
        """Return the first session with exactly this date, or None."""
        for session in self._sessions:
            if session.date == date:
                return session
        return None

    def filter_sessions_by_date(self, date: str) -> list[WorkoutSession]:
        """Return every session with exactly this date, in order."""
        return [session for session in self._sessions if session.date == date]

    def filter_sessions_by_muscle(self, muscle: Muscle) -> list[WorkoutSession]:
        """Return sessions with at least one exercise for the muscle group."""
        return [session for session in self._sessions if session.has_muscle(muscle)]

    def get_all_exercises_by_muscle(self, muscle: Muscle) -> list[Exercise]:
        """Return every exercise for the muscle group across all sessions."""
        return [
            exercise
            for session in self._sessions
            for exercise in session.exercises
            if exercise.muscle == muscle
        ]

    def log_exercise(self, date: str, exercise: Exercise) -> WorkoutSession:
        """Add an exercise to the session for a date.

        A new session is created and added when no session has the date.

        Returns:
            The session the exercise was added to
        """
        session = self.get_session_by_date(date)
        if session is None:
            session = WorkoutSession(date)
            self.add_session(session)
        session.add_exercise(exercise)
        self.events.log_event(f"Logged {exercise.name} on {date}")
        return session

    def find_exercise(self, date: str, name: str) -> tuple[WorkoutSession, Exercise] | None:
        """Find an exercise by name in the session for a date.

        Returns:
            The (session, exercise) pair, or None if either is missing
        """
        session = self.get_session_by_date(date)
        if session is None:
            return None
        exercise = session.find_exercise(name)
        if exercise is None:
            return None
        return session, exercise

    def remove_exercise(self, date: str, name: str) -> bool:
        """Remove an exercise by name from the session for a date.

        Returns:
            True if removed, False if the session or exercise was not found
        """
        session = self.get_session_by_date(date)
        if session is None or not session.remove_exercise(name):
            return False
        self.events.log_event(f"Removed {name} from {date}")
        return True

    def clear(self) -> None:
        """Remove all sessions. The file is untouched until the next save."""
        self._sessions.clear()
        self.events.log_event("Cleared logbook")

    def save(self) -> None:
        """Write all sessions to the bound file.

        Raises:
            WriteError: If the file cannot be written.
        """
        json_codec.write_sessions(self.file_path, self._sessions)
        self._persisted_state = json_codec.encode_sessions(self._sessions)
        self.events.log_event(f"Saved {len(self._sessions)} session(s) to {self.file_path}")

    def load(self) -> None:
        """Replace all sessions with those stored in the bound file.

        The current sessions are kept if reading fails.

        Raises:
            ReadError: If the file is missing, unreadable or malformed.
        """
        try:
            sessions = json_codec.read_sessions(self.file_path)
        except ReadError:
            logger.warning("Could not load logbook from %s", self.file_path)
            raise
        self._sessions = sessions
        self._persisted_state = json_codec.encode_sessions(self._sessions)
        self.events.log_event(f"Loaded {len(self._sessions)} session(s) from {self.file_path}")
