"""
Error types for todolist.

Storage errors carry the underlying engine message unchanged so the command
loop can print it after its own prefix.
"""


class TaskStoreError(Exception):
    """Base class for errors raised by the task store."""


class StorageUnavailable(TaskStoreError):
    """The database file could not be opened or the schema could not be created."""


class WriteFailed(TaskStoreError):
    """An insert or delete was rejected by the database engine."""


class ReadFailed(TaskStoreError):
    """Tasks could not be read back from the database."""


class InvalidCommand(Exception):
    """The user typed a command the loop does not recognize."""

    def __init__(self, command: str) -> None:
        super().__init__("Invalid command. Type 'add', 'delete', or 'view'.")
        self.command = command
