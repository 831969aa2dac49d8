"""
Interactive command loop for todolist.

Reads one command per line from the user and dispatches it to a TaskStore:
- add: prompt for a name and insert it
- delete: prompt for an id and remove it
- view: print every task as "<id>. <name>"
- quit / exit: leave the loop

Arguments are single whitespace-delimited tokens: a name typed as
"Buy milk" is stored as "Buy". End of input ends the loop.
"""

import logging
from typing import Callable, Dict

import typer

from todolist.core.database import TaskStore
from todolist.core.errors import InvalidCommand, TaskStoreError

logger = logging.getLogger(__name__)

PROMPT = "> "
BANNER = (
    "Welcome to the to-do list manager!\n"
    "Type 'add' to add a task, 'delete' to delete a task, or 'view' to view all tasks."
)
EXIT_COMMANDS = ("quit", "exit")
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def first_token(line: str) -> str:
    """Return the first whitespace-delimited token of line, or "" if blank."""
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def parse_task_id(token: str) -> int:
    """
    Parse a task id typed by the user.

    Input that is not an integer, or does not fit in a signed 64-bit
    SQLite INTEGER, yields 0, which matches no task.
    """
    try:
        task_id = int(token)
    except ValueError:
        logger.warning("Could not parse task id %r, using 0", token)
        return 0

    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        logger.warning("Task id %r is out of range, using 0", token)
        return 0
    return task_id


class CommandLoop:
    """Read-eval-print loop over a TaskStore."""

    def __init__(
        self,
        store: TaskStore,
        read: Reader = input,
        write: Writer = typer.echo,
    ) -> None:
        self.store = store
        self._read = read
        self._write = write
        self._handlers: Dict[str, Callable[[], None]] = {
            "add": self.add,
            "delete": self.delete,
            "view": self.view,
        }

    def run(self) -> None:
        """Run until end of input, Ctrl+C, or an exit command."""
        self._write(BANNER)

        while True:
            try:
                command = first_token(self._read(PROMPT))
                if not self.handle(command):
                    break
            except (EOFError, KeyboardInterrupt):
                self._write("")
                logger.info("Input closed, leaving command loop")
                break

    def handle(self, command: str) -> bool:
        """
        Process a single command token.

        Returns:
            False if the loop should stop, True otherwise
        """
        if command in EXIT_COMMANDS:
            return False

        try:
            handler = self._handlers.get(command)
            if handler is None:
                raise InvalidCommand(command)
            handler()
        except InvalidCommand as e:
            logger.debug("Invalid command: %r", e.command)
            self._write(str(e))

        return True

    def add(self) -> None:
        self._write("Enter the name of the task:")
        name = first_token(self._read(""))
        try:
            self.store.add_task(name)
        except TaskStoreError as e:
            logger.warning("Add failed: %s", e)
            self._write(f"Error adding task: {e}")
            return
        self._write("Task added successfully!")

    def delete(self) -> None:
        self._write("Enter the ID of the task to delete:")
        task_id = parse_task_id(first_token(self._read("")))
        try:
            self.store.delete_task(task_id)
        except TaskStoreError as e:
            logger.warning("Delete failed: %s", e)
            self._write(f"Error deleting task: {e}")
            return
        self._write("Task deleted successfully!")

    def view(self) -> None:
        try:
            tasks = self.store.list_tasks()
        except TaskStoreError as e:
            logger.warning("View failed: %s", e)
            self._write(f"Error getting tasks: {e}")
            return

        self._write("Tasks:")
        for task in tasks:
            self._write(task.format_line())
