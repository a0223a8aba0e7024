"""
cli - Command Line Interface for the File Refactor console
"""

from .cli_entry import main, run_console

__all__ = ["main", "run_console"]
