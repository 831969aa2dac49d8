#!/usr/bin/env python3
"""
todolist CLI - interactive to-do list manager.

Opens the task database (creating it if needed) and runs the command loop
until end of input or an exit command.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from todolist.cli.repl import CommandLoop
from todolist.core.database import TaskStore
from todolist.core.errors import StorageUnavailable
from todolist.core.paths import get_db_path, get_log_level

logger = logging.getLogger(__name__)

cli = typer.Typer(
    name="todolist",
    help="todolist CLI - Add, delete and view tasks stored in a local SQLite file",
    add_completion=False,
)


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def run(
    db_path: Optional[Path] = typer.Option(
        None,
        "--db",
        help="Path to database file (default: ./tasks.db or $TODOLIST_DB_PATH)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level written to stderr (default: WARNING)",
    ),
) -> None:
    """
    Start the interactive to-do list manager.

    Commands: add, delete, view, quit. The database file and its tasks
    table are created on first use.
    """
    try:
        _configure_logging(get_log_level(log_level))
        target_db_path = get_db_path(db_path)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    store = TaskStore(target_db_path)
    try:
        store.initialize()
    except StorageUnavailable as e:
        typer.echo(f"Error opening database: {e}", err=True)
        raise typer.Exit(1)

    with store:
        CommandLoop(store).run()

    logger.info("Exiting")


if __name__ == "__main__":
    cli()
