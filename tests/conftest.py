"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from fitness_record.models import Exercise, Logbook, Muscle, WorkoutSession


@pytest.fixture
def temp_logbook_path():
    """Create a temporary logbook file path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "fitness_log.json"


@pytest.fixture
def chest_session():
    """Session on 2025/10/01 with a chest and a back exercise."""
    session = WorkoutSession("2025/10/01")
    session.add_exercise(Exercise("Bench Press", Muscle.CHEST, 150, 3, 5))
    session.add_exercise(Exercise("Pull Up", Muscle.BACK, 0, 5, 8))
    return session


@pytest.fixture
def leg_session():
    """Session on 2025/10/03 with a squat."""
    session = WorkoutSession("2025/10/03")
    session.add_exercise(Exercise("Squat", Muscle.LEGS, 250, 3, 5))
    return session


@pytest.fixture
def sample_logbook(temp_logbook_path, chest_session, leg_session):
    """Logbook holding the chest and leg sessions."""
    logbook = Logbook(temp_logbook_path)
    logbook.add_session(chest_session)
    logbook.add_session(leg_session)
    return logbook

