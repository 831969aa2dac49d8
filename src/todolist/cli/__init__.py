"""
Command-line interface for todolist.

This package provides the typer entry point and the interactive command
loop it drives.
"""

from .main import cli

__all__ = ["cli"]
