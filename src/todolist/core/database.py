"""
Database operations for todolist.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from pydantic import ValidationError

from .errors import ReadFailed, StorageUnavailable, WriteFailed
from .models import Task

logger = logging.getLogger(__name__)

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS tasks ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "name TEXT"
    ")"
)


def _storable_text(text: str) -> str:
    """Replace surrogate-escaped bytes from stdin so the text encodes as UTF-8."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class TaskStore:
    """
    SQLite-backed store for tasks.

    A single connection is opened by initialize() and held until close().
    Every write is committed as soon as it is made. Use the store as a
    context manager to get the open/close pairing for free:

        with TaskStore(path) as store:
            store.add_task("Buy milk")
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "TaskStore":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def initialize(self) -> None:
        """
        Open the database file and ensure the tasks table exists.

        The schema statement is idempotent, so running this against an
        existing database (a restart) keeps all rows.

        Raises:
            StorageUnavailable: If the file cannot be opened or created, or
                the engine rejects the schema statement
        """
        if self._conn is not None:
            return

        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageUnavailable(str(e)) from e

        conn.row_factory = sqlite3.Row
        try:
            conn.execute(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            raise StorageUnavailable(str(e)) from e

        self._conn = conn
        logger.info("Opened task database at %s", self.db_path)

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed task database at %s", self.db_path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageUnavailable("database is not open")
        return self._conn

    def add_task(self, name: str) -> int:
        """
        Insert a new task.

        The name is stored as-is; no validation is performed. Undecodable
        input bytes (carried as surrogate escapes) are stored as U+FFFD.

        Args:
            name: Task text

        Returns:
            The id assigned by the database

        Raises:
            WriteFailed: If the insert is rejected by the engine or the name
                cannot be encoded
        """
        conn = self._connection()
        try:
            cursor = conn.execute(
                "INSERT INTO tasks (name) VALUES (?)", (_storable_text(name),)
            )
            conn.commit()
        except (sqlite3.Error, UnicodeEncodeError) as e:
            conn.rollback()
            raise WriteFailed(str(e)) from e

        task_id = cursor.lastrowid
        logger.debug("Added task id=%s", task_id)
        return task_id

    def delete_task(self, task_id: int) -> None:
        """
        Delete the task with the given id.

        Deleting an id that does not exist is not an error.

        Raises:
            WriteFailed: If the delete is rejected by the engine or the id
                does not fit in an SQLite INTEGER
        """
        conn = self._connection()
        try:
            cursor = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            raise WriteFailed(str(e)) from e

        logger.debug("Deleted task id=%s (rows=%d)", task_id, cursor.rowcount)

    def list_tasks(self) -> List[Task]:
        """
        Return every task in the table, in the order the engine scans them.

        Returns:
            List of Task models, empty if there are no tasks

        Raises:
            ReadFailed: If the query fails or a row cannot be decoded
        """
        conn = self._connection()
        try:
            rows = conn.execute("SELECT id, name FROM tasks").fetchall()
            return [Task.from_dict({key: row[key] for key in row.keys()}) for row in rows]
        except sqlite3.Error as e:
            raise ReadFailed(str(e)) from e
        except ValidationError as e:
            raise ReadFailed(f"malformed task row: {e}") from e


@contextmanager
def open_store(db_path: Union[str, Path]) -> Iterator[TaskStore]:
    """Open a TaskStore for the duration of a with block."""
    store = TaskStore(db_path)
    store.initialize()
    try:
        yield store
    finally:
        store.close()
