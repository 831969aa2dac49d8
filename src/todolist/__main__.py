"""
Entry point for 'python -m todolist'.
"""

from todolist.cli import cli

if __name__ == "__main__":
    cli(prog_name="python -m todolist")
