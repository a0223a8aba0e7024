"""
exec_transform.py - Batch Transform Execution Module

Responsibilities:
- Compute target names for the four batch transforms
- Run a batch top-to-bottom, stopping at the first failing file
- Preview support
"""

from pathlib import Path
from typing import List, Tuple, Optional, Callable
import codecs
import logging
import os

from .models_fs import BatchOp, BatchResult, DirectorySnapshot, TransformError
from .text_match import (
    extension_marker,
    remove_chars,
    remove_prefix_span,
    render_template,
    replace_extension,
    strip_extension,
)

logger = logging.getLogger(__name__)

FILE_ENCODING = "utf-8-sig"

# Maps a source file to its destination, raising TransformError when it cannot
Namer = Callable[[Path], Path]
ProgressCallback = Callable[[int, int, str], None]


def _inside_root(snapshot: DirectorySnapshot, name: str) -> Path:
    """Join a transformed display name onto the root, refusing to leave it"""
    dst = snapshot.root / name
    if Path(name).is_absolute() or snapshot.root.resolve() not in dst.resolve().parents:
        raise TransformError(f"New name '{name}' is outside {snapshot.root}")
    return dst


def remove_chars_namer(snapshot: DirectorySnapshot, offset: int, length: int) -> Namer:
    """Destination with a character range removed from the display name"""
    def namer(path: Path) -> Path:
        return _inside_root(snapshot, remove_chars(snapshot.display_name(path), offset, length))
    return namer


def remove_prefix_namer(snapshot: DirectorySnapshot, target: str, extension: str) -> Namer:
    """Destination with the span from target to the extension removed"""
    def namer(path: Path) -> Path:
        return _inside_root(snapshot, remove_prefix_span(snapshot.display_name(path), target, extension))
    return namer


def change_extension_namer(snapshot: DirectorySnapshot, old_extension: str, new_extension: str) -> Namer:
    """Destination with the old extension replaced"""
    def namer(path: Path) -> Path:
        return _inside_root(snapshot, replace_extension(snapshot.display_name(path), old_extension, new_extension))
    return namer


def template_output_namer(output_dir: Path, asset_extension: str, new_extension: str) -> Namer:
    """Destination of the file generated for an asset"""
    def namer(path: Path) -> Path:
        base_name = strip_extension(path.name, asset_extension)
        return output_dir / (base_name + extension_marker(new_extension))
    return namer


def preview(files: List[Path], namer: Namer) -> List[Tuple[Path, Optional[Path], Optional[str]]]:
    """
    Compute destinations without touching the filesystem

    Returns:
        (source, destination or None, error or None) per file
    """
    rows = []
    for path in files:
        try:
            rows.append((path, namer(path), None))
        except TransformError as e:
            rows.append((path, None, str(e)))
    return rows


def _rename(op: BatchOp) -> None:
    """Rename one file, refusing to replace an existing file"""
    if op.dst.exists():
        raise FileExistsError(f"Destination already exists: {op.dst}")
    os.rename(op.src, op.dst)


def _run_batch(
    files: List[Path],
    namer: Namer,
    apply: Callable[[BatchOp], None],
    progress_callback: Optional[ProgressCallback] = None
) -> BatchResult:
    """
    Apply an operation to every file in order

    The first TransformError, OSError or decoding error stops the batch. Files handled
    before it keep their new state, later files are left untouched.
    """
    result = BatchResult()
    total = len(files)

    for i, path in enumerate(files):
        remaining = files[i + 1:]

        try:
            op = BatchOp(src=path, dst=namer(path))
        except TransformError as e:
            logger.warning("Batch aborted at %s: %s", path, e)
            result.abort(path, str(e), remaining)
            break

        if op.is_same:
            result.skipped.append(path)
            continue

        if progress_callback:
            progress_callback(i + 1, total, f"{op.src.name} -> {op.dst.name}")

        try:
            apply(op)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Batch aborted at %s: %s", path, e)
            result.abort(path, str(e), remaining)
            break

        logger.debug("Done: %s -> %s", op.src, op.dst)
        result.success.append(op)

    return result


def execute_remove_chars(
    snapshot: DirectorySnapshot,
    offset: int,
    length: int,
    progress_callback: Optional[ProgressCallback] = None
) -> BatchResult:
    """
    Remove length characters at offset from every file name

    Args:
        snapshot: Scanned files
        offset: Zero-based start index into the display name
        length: Number of characters to remove
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    namer = remove_chars_namer(snapshot, offset, length)
    return _run_batch(snapshot.files, namer, _rename, progress_callback)


def execute_remove_prefix(
    snapshot: DirectorySnapshot,
    target: str,
    extension: str,
    progress_callback: Optional[ProgressCallback] = None
) -> BatchResult:
    """
    Remove the span from target up to the extension from every file name

    Args:
        snapshot: Scanned files
        target: String the span starts with
        extension: Extension the span ends before
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    namer = remove_prefix_namer(snapshot, target, extension)
    return _run_batch(snapshot.files, namer, _rename, progress_callback)


def execute_change_extension(
    snapshot: DirectorySnapshot,
    old_extension: str,
    new_extension: str,
    progress_callback: Optional[ProgressCallback] = None
) -> BatchResult:
    """Replace the extension of every file"""
    namer = change_extension_namer(snapshot, old_extension, new_extension)
    return _run_batch(snapshot.files, namer, _rename, progress_callback)


def execute_create_files(
    snapshot: DirectorySnapshot,
    template_path: Path,
    asset_extension: str,
    new_extension: str,
    output_dir: Path,
    progress_callback: Optional[ProgressCallback] = None
) -> BatchResult:
    """
    Create one file per asset from a template

    Existing output files are overwritten.

    Args:
        snapshot: Scanned asset files
        template_path: Template whose tokens are replaced
        asset_extension: Extension stripped from the asset names
        new_extension: Extension of the created files
        output_dir: Directory receiving the created files
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    namer = template_output_namer(output_dir, asset_extension, new_extension)

    def write(op: BatchOp) -> None:
        with open(template_path, "r", encoding=FILE_ENCODING, newline="") as f:
            template = f.read()
        base_name = strip_extension(op.src.name, asset_extension)
        with open(op.dst, "w", encoding=FILE_ENCODING, newline="") as f:
            f.write(render_template(template, base_name, asset_extension))

    return _run_batch(snapshot.files, namer, write, progress_callback)


def create_file(path: Path) -> None:
    """Create one empty UTF-8 file (byte order mark only), failing if it exists"""
    with open(path, "xb") as f:
        f.write(codecs.BOM_UTF8)
    logger.debug("Created %s", path)
