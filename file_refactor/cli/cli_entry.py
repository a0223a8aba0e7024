"""
cli_entry.py - CLI Entry Point

Parses the command line, then runs the console loop:
read one line, dispatch it, repeat until quit.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from ..core import Session
from ..wizard import Router
from ..wizard.console import highlight, init_console, print_help

PROMPT = "Enter command: "


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="file-refactor",
        description="A nice tool for renaming, editing & creating files easily.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Work under the home folder
  file-refactor

  # Work under a project folder
  file-refactor --root ./game/Assets
"""
    )
    parser.add_argument("--root", "-r", type=str, default=None,
                        help="Root directory the wizards work under (default: home folder)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def default_root() -> Path:
    """Root used when none is given on the command line"""
    return Path.home()


def run_console(router: Router, read_line: Callable[[str], str] = input) -> int:
    """
    Console loop

    Args:
        router: Dispatcher bound to the session
        read_line: Line reader, input() by default

    Returns:
        Exit status
    """
    session = router.session
    while not session.exit_requested:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            highlight("Quitting application...")
            break
        router.dispatch(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    root = Path(args.root).expanduser().resolve() if args.root else default_root()
    if not root.is_dir():
        print(f"Error: Directory does not exist: {root}")
        return 1

    init_console()
    session = Session(root_path=root)
    router = Router(session)

    print("A nice tool for renaming, editing & creating files easily.\n")
    print(f"Root directory: {root}\n")
    print_help()
    return run_console(router)


if __name__ == "__main__":
    sys.exit(main())
