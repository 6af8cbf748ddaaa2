"""Shared CLI utilities."""

from pathlib import Path

import click

from ..errors import ReadError, WriteError
from ..models import Exercise, Logbook, WorkoutSession


def get_logbook_path(ctx: click.Context) -> Path:
    """Get the logbook path chosen on the command line."""
    return ctx.find_root().obj["logbook_path"]


def open_logbook(ctx: click.Context) -> Logbook:
    """Load the logbook file, or start an empty logbook if it does not exist."""
    logbook = Logbook(get_logbook_path(ctx))
    if not logbook.file_path.exists():
        return logbook

    try:
        logbook.load()
    except ReadError as e:
        echo_error(f"Unable to read from file: {e}")
        ctx.exit(1)
    return logbook


def save_logbook(ctx: click.Context, logbook: Logbook) -> None:
    """Save the logbook, exiting with an error if the file cannot be written."""
    try:
        logbook.save()
    except WriteError as e:
        echo_error(f"Unable to write logs to the file: {e}")
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)


EXERCISE_HEADERS = ["Exercise", "Muscle", "Weight (kg)", "Reps", "Sets"]


def exercise_row(exercise: Exercise) -> list[str]:
    """Table row for an exercise."""
    return [
        exercise.name,
        exercise.muscle.value,
        str(exercise.weight),
        str(exercise.reps),
        str(exercise.sets),
    ]


def format_sessions(sessions: list[WorkoutSession] | tuple[WorkoutSession, ...]) -> str:
    """Render sessions one block per date, with rest days marked."""
    blocks = []
    for session in sessions:
        header = f"DATE: {session.date}\n" + "=" * 40
        if session.is_rest_day():
            body = "  (Rest Day / No exercises logged)"
        else:
            body = format_table(EXERCISE_HEADERS, [exercise_row(e) for e in session.exercises])
        blocks.append(f"{header}\n{body}")
    return "\n\n".join(blocks)


def echo_sessions(sessions, title: str, empty_message: str) -> None:
    """Print a titled list of sessions."""
    click.echo()
    click.echo(click.style(title, bold=True))
    click.echo()
    if not sessions:
        echo_info(empty_message)
        return
    click.echo(format_sessions(sessions))
    click.echo()
    click.echo(f"Total: {len(sessions)} session(s)")
