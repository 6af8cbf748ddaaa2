"""CLI entry point for fitness-record."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import add, clear, exercises, filter_group, remove, shell, show, update
from .config import LOGBOOK_ENV_VAR, get_logbook_path


@click.group()
@click.version_option(version=__version__, prog_name="fitness-record")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=LOGBOOK_ENV_VAR,
    help=f"Logbook JSON file (default: data/fitness_log.json, env: {LOGBOOK_ENV_VAR})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, file_path: Path | None, verbose: bool):
    """fitness-record: a workout logbook.

    Exercises are grouped into sessions by date and stored in a JSON file.

    Example usage:

        # Log an exercise (date defaults to today)
        fitness-record add "bench press" --muscle chest -w 60 -r 10 -s 4

        # Review what you logged
        fitness-record show
        fitness-record filter muscle chest

        # Use the interactive menu
        fitness-record shell
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["logbook_path"] = file_path if file_path is not None else get_logbook_path()


# Register commands
main.add_command(add)
main.add_command(remove)
main.add_command(update)
main.add_command(clear)
main.add_command(show)
main.add_command(filter_group)
main.add_command(exercises)
main.add_command(shell)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
