"""JSON file format for logbooks.

A logbook file holds a top-level array of session objects::

    [
        {
            "date": "2025/10/01",
            "exercises": [
                {
                    "exercise name": "Bench press",
                    "muscle type": "CHEST",
                    "weight": 150,
                    "sets": 3,
                    "reps": 5
                }
            ]
        }
    ]
"""

import json
import logging
from pathlib import Path

from ..errors import ParseError, ReadError, WriteError
from ..models.session import WorkoutSession

logger = logging.getLogger(__name__)

INDENT = 4


def encode_sessions(sessions) -> list[dict]:
    """Convert sessions to the JSON-ready array, preserving order."""
    return [session.to_dict() for session in sessions]


def decode_sessions(data) -> list[WorkoutSession]:
    """Build sessions from a parsed JSON document.

    Every record must decode; one bad record fails the whole document.

    Raises:
        ParseError: If the document is not an array or a record is malformed.
    """
    if not isinstance(data, list):
        raise ParseError(f"Logbook must be a JSON array, got {type(data).__name__}")

    sessions = []
    for index, record in enumerate(data):
        try:
            sessions.append(WorkoutSession.from_dict(record))
        except ParseError as e:
            raise ParseError(f"Session {index}: {e}") from e
    return sessions


def write_sessions(path: Path, sessions) -> None:
    """Write sessions to a JSON file, replacing its contents.

    Raises:
        WriteError: If the file cannot be opened or written.
    """
    records = encode_sessions(sessions)
    document = json.dumps(records, indent=INDENT)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
    except (OSError, ValueError) as e:
        # ValueError covers paths with embedded NUL characters
        raise WriteError(f"Unable to write {path}: {e}") from e
    logger.debug("Wrote %d session(s) to %s", len(records), path)


def read_sessions(path: Path) -> list[WorkoutSession]:
    """Read sessions from a JSON file.

    An empty array is a valid logbook with no sessions.

    Raises:
        ReadError: If the file is missing, unreadable, not JSON, or holds
            a malformed record.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ReadError(f"{path} is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ReadError(f"Unable to read {path}: {e}") from e

    try:
        sessions = decode_sessions(data)
    except ParseError as e:
        raise ReadError(f"Unable to parse {path}: {e}") from e

    logger.debug("Read %d session(s) from %s", len(sessions), path)
    return sessions
