"""
scan_files.py - File Scanning Module

Provides the recursive, extension-filtered directory scan
"""

from pathlib import Path
from typing import List
import logging
import os

from .models_fs import DirectorySnapshot, ScanError
from .text_match import extension_marker

logger = logging.getLogger(__name__)


def resolve_directory(root: Path, suffix: str) -> Path:
    """
    Join the configured root with a user supplied suffix

    Args:
        root: Configured root directory
        suffix: Root-relative directory typed by the user (may be empty)

    Returns:
        Resolved absolute directory
    """
    suffix = suffix.strip().strip("/\\")
    directory = Path(root) / suffix if suffix else Path(root)
    return directory.expanduser().resolve()


def relative_name(root: Path, directory: Path) -> str:
    """Directory path with the root prefix and surrounding separators stripped"""
    name = str(directory)[len(str(root)):]
    return name.strip("/\\").replace(os.sep, "/")


def list_matching(directory: Path, extension: str) -> List[Path]:
    """
    List files of one directory (non-recursive) ending with ".extension"

    Args:
        directory: Directory to list
        extension: Extension filter, with or without leading dot

    Returns:
        Matching files sorted by name
    """
    marker = extension_marker(extension)
    return sorted(
        (item for item in directory.iterdir() if item.is_file() and item.name.endswith(marker)),
        key=lambda p: p.name,
    )


def scan_tree(
    root: Path,
    suffix: str,
    extension: str
) -> List[DirectorySnapshot]:
    """
    Scan a directory and all of its subdirectories for files with an extension

    The root directory is visited first, then every subdirectory top-down
    with names in sorted order.

    Args:
        root: Configured root directory
        suffix: Root-relative directory typed by the user
        extension: Extension filter

    Returns:
        One snapshot per visited directory, in visiting order
    """
    directory = resolve_directory(root, suffix)
    if not directory.is_dir():
        raise ScanError(f"Directory does not exist: {directory}")

    snapshots: List[DirectorySnapshot] = []

    def on_error(error: OSError) -> None:
        if Path(error.filename or "") == directory:
            raise ScanError(f"Cannot read directory {directory}: {error.strerror}")
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)

    for dirpath, dirnames, _ in os.walk(directory, onerror=on_error):
        # Sorting in place fixes the order os.walk descends in
        dirnames.sort()
        current_dir = Path(dirpath)

        try:
            files = list_matching(current_dir, extension)
        except OSError as e:
            if current_dir == directory:
                raise ScanError(f"Cannot read directory {directory}: {e}") from e
            logger.warning("Skipping unreadable directory %s: %s", current_dir, e)
            continue

        snapshot = DirectorySnapshot(
            relative_name=relative_name(directory, current_dir),
            root=directory,
            files=files,
        )
        logger.debug("Scanned %s: %d matching files", current_dir, len(files))
        snapshots.append(snapshot)

    return snapshots
