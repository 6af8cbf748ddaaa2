"""Interactive menu for logging workouts."""

from typing import Protocol

import click
import questionary
from questionary import Style

from ..errors import ReadError, WriteError
from ..models import Logbook, Muscle
from .base import (
    echo_error,
    echo_info,
    echo_sessions,
    echo_success,
    echo_warning,
    get_logbook_path,
)
from .forms import DateForm, ExerciseForm, FormResult, parse_count, today

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

ADD = "Add exercise"
REMOVE = "Remove exercise"
UPDATE = "Update exercise"
VIEW = "View all logs"
FILTER = "Filter logs"
SAVE = "Save logs to file"
LOAD = "Load logs from file"
QUIT = "Quit"

MENU = [ADD, REMOVE, UPDATE, VIEW, FILTER, SAVE, LOAD, QUIT]

UPDATE_FIELDS = [
    "Exercise Name",
    "Muscle Type",
    "Weight (kg)",
    "Number of Reps",
    "Number of Sets",
    "Date yyyy/mm/dd",
]


class Prompter(Protocol):
    """Source of answers for the interactive shell."""

    def text(self, message: str, default: str = "") -> str | None:
        ...

    def select(self, message: str, choices: list[str]) -> str | None:
        ...

    def confirm(self, message: str, default: bool = True) -> bool | None:
        ...


class QuestionaryPrompter:
    """Prompter backed by questionary terminal prompts."""

    def text(self, message: str, default: str = "") -> str | None:
        return questionary.text(message, default=default, style=custom_style).ask()

    def select(self, message: str, choices: list[str]) -> str | None:
        return questionary.select(message, choices=choices, style=custom_style).ask()

    def confirm(self, message: str, default: bool = True) -> bool | None:
        return questionary.confirm(message, default=default, style=custom_style).ask()


class InteractiveShell:
    """Menu loop over a logbook.

    Nothing is written to disk unless the user picks the save entry.
    """

    def __init__(self, logbook: Logbook, prompter: Prompter | None = None):
        self.logbook = logbook
        self.prompter = prompter or QuestionaryPrompter()

    def run(self) -> None:
        """Load the logbook, then handle menu choices until the user quits."""
        self._load_on_startup()

        actions = {
            ADD: self.add_exercise,
            REMOVE: self.remove_exercise,
            UPDATE: self.update_exercise,
            VIEW: self.view_all,
            FILTER: self.filter_logs,
            SAVE: self.save,
            LOAD: self.load,
        }

        while True:
            click.echo()
            choice = self.prompter.select("What would you like to do?", MENU)
            if choice is None or choice == QUIT:
                if self.confirm_exit():
                    break
                continue
            actions[choice]()

        self.print_event_log()

    def _load_on_startup(self) -> None:
        if not self.logbook.file_path.exists():
            echo_info("No existing log file found. Starting fresh.")
            return
        try:
            self.logbook.load()
        except ReadError as e:
            echo_warning(f"Could not load existing logs ({e}). Starting fresh.")
            return
        echo_info(f"Loaded {len(self.logbook.sessions)} session(s) from {self.logbook.file_path}")

    def _ask_date(self, message: str = "Date (yyyy/mm/dd)") -> str | None:
        answer = self.prompter.text(message, default=today())
        if answer is None:
            return None
        result = DateForm.from_text(answer).validate()
        if not self._report(result):
            return None
        return result.value

    def _report(self, result: FormResult) -> bool:
        for message in result.errors:
            echo_error(message)
        return result.ok

    def add_exercise(self) -> None:
        """Prompt for an exercise and log it on a date."""
        name = self.prompter.text("Exercise name")
        if name is None:
            return
        muscle = self.prompter.select("Muscle type", [m.value for m in Muscle])
        if muscle is None:
            return
        weight = self.prompter.text("Weight (kg)", default="0")
        if weight is None:
            return
        reps = self.prompter.text("Number of reps", default="0")
        if reps is None:
            return
        sets = self.prompter.text("Number of sets", default="0")
        if sets is None:
            return

        result = ExerciseForm(name, muscle, weight, reps, sets).validate()
        if not self._report(result):
            return

        date = self._ask_date()
        if date is None:
            return

        exercise = result.value
        self.logbook.log_exercise(date, exercise)
        echo_success(f"Exercise added: {exercise.get_summary()} on {date}")

    def remove_exercise(self) -> None:
        """Prompt for a date and name and remove the matching exercise."""
        date = self._ask_date()
        if date is None:
            return
        if self.logbook.get_session_by_date(date) is None:
            echo_error(f"No workout session found for date: {date}")
            return

        name = self.prompter.text("Exercise name to remove")
        if name is None:
            return
        if self.logbook.remove_exercise(date, name):
            echo_success(f"Exercise '{name}' removed successfully.")
        else:
            echo_error(f"Exercise '{name}' not found on this date.")

    def update_exercise(self) -> None:
        """Find an exercise by date and name, then change one of its fields."""
        date = self._ask_date()
        if date is None:
            return
        if self.logbook.get_session_by_date(date) is None:
            echo_error(f"No workout session found for date: {date}")
            return

        name = self.prompter.text("Exercise name to update")
        if name is None:
            return
        found = self.logbook.find_exercise(date, name)
        if found is None:
            echo_error(f"Exercise '{name}' not found on this date.")
            return
        session, exercise = found

        field = self.prompter.select("Choose field to update", UPDATE_FIELDS)
        if field is None:
            return

        if field == "Exercise Name":
            new_name = self.prompter.text("New exercise name", default=exercise.name)
            if not new_name or not new_name.strip():
                echo_error("Exercise name cannot be empty")
                return
            exercise.name = new_name.strip()
        elif field == "Muscle Type":
            muscle = self.prompter.select("New muscle type", [m.value for m in Muscle])
            if muscle is None:
                return
            exercise.muscle = Muscle(muscle)
        elif field == "Date yyyy/mm/dd":
            new_date = self._ask_date("New date (yyyy/mm/dd)")
            if new_date is None:
                return
            session.date = new_date
        else:
            attribute = {
                "Weight (kg)": "weight",
                "Number of Reps": "reps",
                "Number of Sets": "sets",
            }[field]
            raw = self.prompter.text(f"New {field.lower()}", default=str(getattr(exercise, attribute)))
            if raw is None:
                return
            value = parse_count(raw)
            if value is None:
                echo_error(f"Please enter a valid whole number for {attribute}")
                return
            setattr(exercise, attribute, value)

        self.logbook.events.log_event(f"Updated {field.lower()} of {exercise.name} on {session.date}")
        echo_success("Exercise updated successfully!")

    def view_all(self) -> None:
        echo_sessions(self.logbook.sessions, "All Workouts", "No exercises have been logged yet.")

    def filter_logs(self) -> None:
        """Show sessions for a date or a muscle group."""
        mode = self.prompter.select("Filter by", ["Date", "Muscle type"])
        if mode is None:
            return

        if mode == "Date":
            date = self._ask_date()
            if date is None:
                return
            sessions = self.logbook.filter_sessions_by_date(date)
            title = f"Workouts on {date}"
        else:
            label = self.prompter.select("Muscle type", [m.value for m in Muscle])
            if label is None:
                return
            muscle = Muscle(label)
            sessions = self.logbook.filter_sessions_by_muscle(muscle)
            title = f"Workouts for {muscle.get_display_name()}"

        echo_sessions(sessions, title, "No workout found matching this filter.")

    def save(self) -> None:
        try:
            self.logbook.save()
        except WriteError as e:
            echo_error(f"Unable to write logs to the file: {e}")
            return
        echo_success("Logs saved successfully!")

    def load(self) -> None:
        if not self.logbook.is_persisted and self.logbook.sessions:
            if not self.prompter.confirm("Discard unsaved changes and load from file?", default=False):
                return
        try:
            self.logbook.load()
        except ReadError as e:
            echo_error(f"Unable to read from file: {e}")
            return
        echo_success("Logs successfully loaded!")

    def confirm_exit(self) -> bool:
        """Ask before quitting, warning about unsaved changes."""
        message = "Would you like to close this application?"
        if not self.logbook.is_persisted and self.logbook.sessions:
            message = "You have unsaved changes. Close without saving?"
        answer = self.prompter.confirm(message, default=True)
        # Ctrl-C at the confirmation also quits
        return answer is None or answer

    def print_event_log(self) -> None:
        """Print every event recorded during this run."""
        if not self.logbook.events:
            return
        click.echo()
        click.echo(click.style("Event Log", bold=True))
        click.echo("=" * 40)
        for event in self.logbook.events:
            click.echo(str(event))


@click.command()
@click.pass_context
def shell(ctx):
    """Open the interactive workout menu.

    Logs are loaded on startup and only written when you choose to save.
    The event log is printed when you quit.
    """
    InteractiveShell(Logbook(get_logbook_path(ctx))).run()
