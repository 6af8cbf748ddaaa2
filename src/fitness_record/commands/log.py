"""Commands that change the logbook."""

import click

from ..models import Exercise, Muscle
from .base import echo_error, echo_info, echo_success, echo_warning, open_logbook, save_logbook
from .forms import today

MUSCLE_CHOICE = click.Choice([m.value for m in Muscle], case_sensitive=False)


@click.command()
@click.argument("name")
@click.option("--muscle", "-m", type=MUSCLE_CHOICE, required=True, help="Muscle group trained")
@click.option("--weight", "-w", type=click.IntRange(min=0), default=0, help="Weight lifted (kg)")
@click.option("--reps", "-r", type=click.IntRange(min=0), default=0, help="Number of reps")
@click.option("--sets", "-s", type=click.IntRange(min=0), default=0, help="Number of sets")
@click.option("--date", "-d", "date", default=None, help="Session date (yyyy/mm/dd), defaults to today")
@click.pass_context
def add(ctx, name: str, muscle: str, weight: int, reps: int, sets: int, date: str | None):
    """Log an exercise on a date.

    A new session is started when nothing has been logged on that date yet.

    Example:

        fitness-record add "bench press" -m chest -w 60 -r 10 -s 4 -d 2025/10/01
    """
    if not name.strip():
        echo_error("Exercise name is required")
        ctx.exit(1)

    date = date or today()
    logbook = open_logbook(ctx)
    exercise = Exercise(name.strip(), Muscle(muscle.upper()), weight, reps, sets)
    logbook.log_exercise(date, exercise)
    save_logbook(ctx, logbook)

    echo_success(f"Exercise added: {exercise.get_summary()} on {date}")


@click.command()
@click.argument("name")
@click.option("--date", "-d", "date", required=True, help="Session date (yyyy/mm/dd)")
@click.pass_context
def remove(ctx, name: str, date: str):
    """Remove an exercise from the session on a date."""
    logbook = open_logbook(ctx)

    if logbook.get_session_by_date(date) is None:
        echo_error(f"No workout session found for date: {date}")
        ctx.exit(1)

    if not logbook.remove_exercise(date, name):
        echo_error(f"Exercise '{name}' not found on this date.")
        ctx.exit(1)

    save_logbook(ctx, logbook)
    echo_success(f"Exercise '{name}' removed successfully.")


@click.command()
@click.argument("name")
@click.option("--date", "-d", "date", required=True, help="Session date (yyyy/mm/dd)")
@click.option("--name", "new_name", help="New exercise name")
@click.option("--muscle", "-m", type=MUSCLE_CHOICE, help="New muscle group")
@click.option("--weight", "-w", type=click.IntRange(min=0), help="New weight (kg)")
@click.option("--reps", "-r", type=click.IntRange(min=0), help="New number of reps")
@click.option("--sets", "-s", type=click.IntRange(min=0), help="New number of sets")
@click.option("--new-date", help="Move the whole session to a new date")
@click.pass_context
def update(
    ctx,
    name: str,
    date: str,
    new_name: str | None,
    muscle: str | None,
    weight: int | None,
    reps: int | None,
    sets: int | None,
    new_date: str | None,
):
    """Update an exercise logged on a date.

    Only the options given are changed. --new-date changes the date of the
    session the exercise belongs to.
    """
    logbook = open_logbook(ctx)

    if logbook.get_session_by_date(date) is None:
        echo_error(f"No workout session found for date: {date}")
        ctx.exit(1)

    found = logbook.find_exercise(date, name)
    if found is None:
        echo_error(f"Exercise '{name}' not found on this date.")
        ctx.exit(1)
    session, exercise = found

    if new_name is not None and not new_name.strip():
        echo_error("Exercise name cannot be empty")
        ctx.exit(1)

    changes = []
    if new_name is not None:
        exercise.name = new_name.strip()
        changes.append(f"name={exercise.name}")
    if muscle is not None:
        exercise.muscle = Muscle(muscle.upper())
        changes.append(f"muscle={exercise.muscle.value}")
    if weight is not None:
        exercise.weight = weight
        changes.append(f"weight={weight}")
    if reps is not None:
        exercise.reps = reps
        changes.append(f"reps={reps}")
    if sets is not None:
        exercise.sets = sets
        changes.append(f"sets={sets}")
    if new_date is not None:
        existing = logbook.get_session_by_date(new_date)
        if existing is not None and existing is not session:
            echo_warning(
                f"A session already exists on {new_date}; lookups by that date "
                "only find the first session added."
            )
        session.date = new_date
        changes.append(f"date={new_date}")

    if not changes:
        echo_warning("Nothing to update. Pass at least one field option.")
        return

    logbook.events.log_event(f"Updated {exercise.name}: {', '.join(changes)}")
    save_logbook(ctx, logbook)
    echo_success("Exercise updated successfully!")
    click.echo(exercise.get_summary())


@click.command()
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
def clear(ctx, force: bool):
    """Delete every session in the logbook."""
    logbook = open_logbook(ctx)

    if not logbook.sessions:
        echo_info("The logbook is already empty")
        return

    if not force:
        click.echo(f"The logbook holds {len(logbook.sessions)} session(s).")
        if not click.confirm("Are you sure you want to delete all of them?"):
            echo_info("Cancelled")
            return

    logbook.clear()
    save_logbook(ctx, logbook)
    echo_success("Logbook cleared")
