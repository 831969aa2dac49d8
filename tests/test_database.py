"""
Tests for TaskStore lifecycle: schema creation, restart and failures.
"""

import sqlite3
from pathlib import Path

import pytest

from todolist.core.database import TaskStore, open_store
from todolist.core.errors import StorageUnavailable


class TestInitialize:
    """Test TaskStore.initialize."""

    def test_initialize_creates_file_and_table(self, test_db: Path):
        """Test that initialize creates the database with the tasks table."""
        store = TaskStore(test_db)
        store.initialize()
        store.close()

        assert test_db.exists()
        conn = sqlite3.connect(test_db)
        columns = [row[1] for row in conn.execute("PRAGMA table_info(tasks)")]
        conn.close()
        assert columns == ["id", "name"]

    def test_initialize_is_idempotent_across_restarts(self, test_db: Path):
        """Test that reopening an existing database keeps its rows."""
        with TaskStore(test_db) as store:
            store.add_task("Buy milk")
            store.add_task("Call Bob")

        with TaskStore(test_db) as store:
            tasks = store.list_tasks()
            assert [(t.id, t.name) for t in tasks] == [(1, "Buy milk"), (2, "Call Bob")]
            assert store.add_task("Walk dog") == 3

    def test_initialize_twice_on_same_instance(self, store: TaskStore):
        """Test that a second initialize call keeps the store usable."""
        store.add_task("before")
        store.initialize()

        assert [t.name for t in store.list_tasks()] == ["before"]

    def test_initialize_missing_directory(self, tmp_path: Path):
        """Test that a path in a missing directory raises StorageUnavailable."""
        store = TaskStore(tmp_path / "missing" / "tasks.db")

        with pytest.raises(StorageUnavailable):
            store.initialize()

    def test_initialize_path_is_directory(self, tmp_path: Path):
        """Test that a directory path raises StorageUnavailable."""
        store = TaskStore(tmp_path)

        with pytest.raises(StorageUnavailable):
            store.initialize()

    def test_initialize_not_a_database(self, test_db: Path):
        """Test that a file with foreign content is rejected by the schema step."""
        test_db.write_bytes(b"this is definitely not a sqlite database" * 100)
        store = TaskStore(test_db)

        with pytest.raises(StorageUnavailable, match="not a database"):
            store.initialize()


class TestLifecycle:
    """Test open/close behavior."""

    def test_operation_before_initialize(self, test_db: Path):
        """Test that using a store before opening it raises StorageUnavailable."""
        store = TaskStore(test_db)

        with pytest.raises(StorageUnavailable, match="not open"):
            store.list_tasks()

    def test_close_is_repeatable(self, store: TaskStore):
        """Test that close can be called more than once."""
        store.close()
        store.close()

        with pytest.raises(StorageUnavailable):
            store.add_task("after close")

    def test_context_manager_closes(self, test_db: Path):
        """Test that leaving the with block closes the connection."""
        with TaskStore(test_db) as store:
            store.add_task("x")

        with pytest.raises(StorageUnavailable):
            store.list_tasks()

    def test_open_store_helper(self, test_db: Path):
        """Test that open_store yields an initialized store and closes it."""
        with open_store(test_db) as store:
            store.add_task("from helper")
            assert [t.name for t in store.list_tasks()] == ["from helper"]

        with pytest.raises(StorageUnavailable):
            store.list_tasks()
