"""
safety_checks.py - Safety Check Module

Provides the checks the wizards run before asking for confirmation
"""

from pathlib import Path
from typing import Tuple, Optional
import os


def check_directory(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that a directory exists

    Args:
        path: Path to check

    Returns:
        (exists, error_reason)
    """
    if not path.is_dir():
        return False, f"Directory does not exist: {path}"
    return True, None


def check_template(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that a template file exists and can be read

    Args:
        path: Template path

    Returns:
        (is_readable, error_reason)
    """
    if not path.is_file():
        return False, f"Template file does not exist: {path}"
    if not os.access(path, os.R_OK):
        return False, f"Template file is not readable: {path}"
    try:
        path.read_bytes().decode("utf-8-sig")
    except UnicodeDecodeError as e:
        return False, f"Template file is not valid UTF-8: {path} ({e.reason} at byte {e.start})"
    except OSError as e:
        return False, f"Template file is not readable: {path} ({e})"
    return True, None


def check_writable(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if path is writable

    Args:
        path: Path to check

    Returns:
        (is_writable, error_reason)
    """
    if path.exists():
        # File exists, check if writable
        if not os.access(path, os.W_OK):
            return False, f"File is not writable: {path}"
    else:
        # File doesn't exist, check if parent directory is writable
        parent = path.parent
        if not parent.exists():
            return False, f"Parent directory does not exist: {parent}"
        if not os.access(parent, os.W_OK):
            return False, f"Directory is not writable: {parent}"

    return True, None


def check_new_file(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that a new file can be created at path without overwriting

    Args:
        path: File to create

    Returns:
        (can_create, error_reason)
    """
    if path.exists():
        return False, f"File already exists: {path}"
    return check_writable(path)
