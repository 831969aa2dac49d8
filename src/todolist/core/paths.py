"""
Database path and log level resolution for todolist.

The database file is located with the following strategy:
1. An explicit path passed on the command line (--db)
2. TODOLIST_DB_PATH environment variable (absolute override)
3. tasks.db in the current working directory

Constraints and Failure Modes:
- TODOLIST_DB_PATH must be an absolute path if provided
- The parent directory is NOT created; a missing directory surfaces as
  StorageUnavailable when the store is initialized
"""

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_DB_NAME = "tasks.db"
DB_PATH_ENV = "TODOLIST_DB_PATH"
LOG_LEVEL_ENV = "TODOLIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_db_path(override: Optional[Path] = None) -> Path:
    """
    Get the database path using the following priority:

    1. override (if given)
    2. TODOLIST_DB_PATH environment variable (if set, must be absolute)
    3. ./tasks.db relative to the current working directory

    Args:
        override: Path given explicitly by the caller

    Returns:
        Path: Location of the database file

    Raises:
        ValueError: If TODOLIST_DB_PATH is set but not an absolute path
    """
    if override is not None:
        return override

    env_path = os.getenv(DB_PATH_ENV)
    if env_path:
        db_path = Path(env_path)
        if not db_path.is_absolute():
            raise ValueError(f"{DB_PATH_ENV} must be an absolute path, got: {env_path}")
        return db_path

    return Path(DEFAULT_DB_NAME)


def get_log_level(override: Optional[str] = None) -> int:
    """
    Resolve a logging level from an explicit name or TODOLIST_LOG_LEVEL.

    An unrecognized TODOLIST_LOG_LEVEL falls back to WARNING; only an
    explicit override is rejected.

    Raises:
        ValueError: If override is not a standard logging level
    """
    if override is None:
        level = logging.getLevelName((os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper())
        return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)

    name = override.upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid log level: {name}. "
            "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level
