"""
Pytest configuration and fixtures for todolist tests.
"""

from pathlib import Path
from typing import Generator

import pytest

from todolist.core.database import TaskStore


@pytest.fixture(scope="function")
def test_db(tmp_path: Path) -> Path:
    """
    Path to a database file that does not exist yet.

    Each test gets its own directory, so tests never share rows.
    """
    return tmp_path / "tasks.db"


@pytest.fixture(scope="function")
def store(test_db: Path) -> Generator[TaskStore, None, None]:
    """
    Provide an initialized TaskStore on the test database.

    Yields:
        TaskStore: Open store, closed again after the test
    """
    task_store = TaskStore(test_db)
    task_store.initialize()
    try:
        yield task_store
    finally:
        task_store.close()
