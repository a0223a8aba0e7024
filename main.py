#!/usr/bin/env python3
"""
File Refactor Console - Main Entry

Usage:
    python main.py                      # Work under the home folder
    python main.py --root ./Assets      # Work under another folder
    python main.py --verbose            # With debug logging
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))

from file_refactor.cli import main


if __name__ == "__main__":
    sys.exit(main())
