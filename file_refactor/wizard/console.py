"""
console.py - Console Output Helpers

Highlighted lines, headers, screen clearing and the static help text
"""

import os

from colorama import Fore, Style, init

HELP_LINES = [
    "help - Prints all common commands.",
    "quit - Stops the application.",
    "clear - Clears the application from text.",
    "restart - Restarts the application (TBD).",
    "commands - Displays all available commands for the current page.",
    "return - Leaves the current page and goes back to the menu.",
    "reset - Restarts the wizard of the current page from the first step.",
]


def init_console() -> None:
    """Enable ANSI colour handling (no-op on terminals that support it)"""
    init()


def highlight(text: str) -> None:
    """Print text in the highlight colour"""
    print(f"{Fore.YELLOW}{text}{Style.RESET_ALL}")


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def print_help():
    """Print the common commands"""
    print("Help: \n")
    for line in HELP_LINES:
        highlight(line)
    print("\n")
