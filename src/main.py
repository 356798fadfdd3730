"""Main entry point for the terminal todo list.

Loads tasks.csv from the working directory, then hands the session to the
prompt_toolkit driver until the user quits.
"""
import sys
from typing import Optional

import click

from cli import CLI
from logging_setup import level_for_verbosity, setup_logging
from session import Session
from storage import LoadError, Storage, TASKS_FILE

__version__ = "0.1.0"


@click.command()
@click.option("--alt-screen/--no-alt-screen", default=None,
              help="Draw on the terminal's alternate screen (default: $TODO_ALT_SCREEN, on).")
@click.option("-v", "--verbose", count=True, help="Log more to stderr (-vv for debug).")
@click.version_option(__version__, prog_name="todo")
def main(alt_screen: Optional[bool], verbose: int) -> None:
    """Add, list, complete and delete tasks kept in ./tasks.csv."""
    setup_logging(level_for_verbosity(verbose))
    storage = Storage(TASKS_FILE)
    try:
        tasks = storage.load_tasks()
    except LoadError as exc:
        click.echo(f"Error loading tasks: {exc}", err=True)
        sys.exit(1)

    session = Session(tasks, storage)
    try:
        CLI(session, alt_screen=alt_screen).run()
    except Exception as exc:  # any driver failure is fatal
        click.echo(f"Error running program: {exc}", err=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
