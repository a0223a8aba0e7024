"""
core - File Refactor Core Module

Provides directory scanning, name transforms and batch execution
"""

from .models_fs import (
    PageType,
    DirectorySnapshot,
    Session,
    BatchOp,
    BatchResult,
    ScanError,
    TransformError,
)

from .scan_files import (
    scan_tree,
    list_matching,
    resolve_directory,
)

from .text_match import (
    normalize_extension,
    extension_marker,
    is_affirmative,
    remove_chars,
    remove_prefix_span,
    replace_extension,
    strip_extension,
    render_template,
)

from .exec_transform import (
    preview,
    remove_chars_namer,
    remove_prefix_namer,
    change_extension_namer,
    template_output_namer,
    execute_remove_chars,
    execute_remove_prefix,
    execute_change_extension,
    execute_create_files,
    create_file,
)

from .safety_checks import (
    check_directory,
    check_template,
    check_writable,
    check_new_file,
)

__all__ = [
    # Data models
    "PageType",
    "DirectorySnapshot",
    "Session",
    "BatchOp",
    "BatchResult",
    "ScanError",
    "TransformError",

    # Scanning
    "scan_tree",
    "list_matching",
    "resolve_directory",

    # Text processing
    "normalize_extension",
    "extension_marker",
    "is_affirmative",
    "remove_chars",
    "remove_prefix_span",
    "replace_extension",
    "strip_extension",
    "render_template",

    # Execution
    "preview",
    "remove_chars_namer",
    "remove_prefix_namer",
    "change_extension_namer",
    "template_output_namer",
    "execute_remove_chars",
    "execute_remove_prefix",
    "execute_change_extension",
    "execute_create_files",
    "create_file",

    # Safety checks
    "check_directory",
    "check_template",
    "check_writable",
    "check_new_file",
]
