"""Commands that display the logbook."""

import click

from ..models import Muscle
from .base import EXERCISE_HEADERS, echo_info, echo_sessions, exercise_row, format_table, open_logbook
from .log import MUSCLE_CHOICE


@click.command()
@click.pass_context
def show(ctx):
    """Show every logged session."""
    logbook = open_logbook(ctx)
    echo_sessions(logbook.sessions, "All Workouts", "No exercises have been logged yet.")


@click.group(name="filter")
def filter_group():
    """Show sessions matching a date or muscle group."""
    pass


@filter_group.command(name="date")
@click.argument("date")
@click.pass_context
def filter_date(ctx, date: str):
    """Show every session logged on DATE (yyyy/mm/dd)."""
    logbook = open_logbook(ctx)
    sessions = logbook.filter_sessions_by_date(date)
    echo_sessions(sessions, f"Workouts on {date}", "No workout found matching this filter.")


@filter_group.command(name="muscle")
@click.argument("muscle", type=MUSCLE_CHOICE)
@click.pass_context
def filter_muscle(ctx, muscle: str):
    """Show every session that trained MUSCLE."""
    logbook = open_logbook(ctx)
    target = Muscle(muscle.upper())
    sessions = logbook.filter_sessions_by_muscle(target)
    echo_sessions(
        sessions,
        f"Workouts for {target.get_display_name()}",
        "No workout found matching this filter.",
    )


@click.command()
@click.argument("muscle", type=MUSCLE_CHOICE)
@click.pass_context
def exercises(ctx, muscle: str):
    """List every exercise logged for MUSCLE across all sessions."""
    logbook = open_logbook(ctx)
    target = Muscle(muscle.upper())
    found = logbook.get_all_exercises_by_muscle(target)

    if not found:
        echo_info(f"No {target.get_display_name()} exercises logged yet.")
        return

    click.echo()
    click.echo(format_table(EXERCISE_HEADERS, [exercise_row(e) for e in found]))
    click.echo()
    click.echo(f"Total: {len(found)} exercise(s)")
