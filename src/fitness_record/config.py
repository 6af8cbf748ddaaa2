"""Locations of fitness-record data files."""

from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

LOGBOOK_FILENAME = "fitness_log.json"

# Environment variable that overrides the logbook path
LOGBOOK_ENV_VAR = "FITNESS_RECORD_FILE"


def get_logbook_path(data_dir: Path | None = None) -> Path:
    """Get the logbook file path, creating the data directory if needed."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / LOGBOOK_FILENAME
