"""
todolist - a command-line to-do list manager backed by SQLite.
"""

__version__ = "0.1.0"
