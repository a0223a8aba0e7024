"""
models_fs.py - Core Data Structure Definitions

Contains:
- PageType: Wizard pages of the console
- DirectorySnapshot: Result of one scanned directory
- Session: Process-wide wizard state
- BatchOp / BatchResult: Batch transform bookkeeping
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List
from enum import Enum


class PageType(Enum):
    """Console page enumeration"""
    MENU = "Menu"
    CREATE_FILE = "CreateFile"
    REMOVE_CHARS = "RemoveChars"
    REMOVE_PREFIX = "RemovePrefix"
    CHANGE_EXTENSION = "ChangeExtension"
    CREATE_FILES = "CreateFiles"


class ScanError(ValueError):
    """Directory could not be enumerated"""


class TransformError(ValueError):
    """A file name does not carry the token a transform needs"""


@dataclass
class DirectorySnapshot:
    """Files of one scanned directory matching an extension filter"""
    relative_name: str              # Directory relative to the resolved root ("" for the root)
    root: Path                      # Resolved root the scan started from
    files: List[Path] = field(default_factory=list)

    @property
    def directory(self) -> Path:
        """Absolute path of the scanned directory"""
        return self.root / self.relative_name if self.relative_name else self.root

    def display_name(self, path: Path) -> str:
        """File name prefixed with the relative directory, if any"""
        if self.relative_name:
            return f"{self.relative_name}/{path.name}"
        return path.name

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class Session:
    """Wizard state shared by every command handler"""
    root_path: Path
    page: PageType = PageType.MENU
    step: int = 1
    awaiting_value: bool = False
    exit_requested: bool = False

    # Values collected by the wizards
    directory_suffix: str = ""
    template_path: Optional[Path] = None
    file_extension: Optional[str] = None
    new_extension: Optional[str] = None
    target_string: str = ""
    refactor_offset: int = 0
    refactor_trim_length: int = 0
    output_directory: Optional[Path] = None
    file_name: str = ""

    snapshot: Optional[DirectorySnapshot] = None

    @property
    def matched_files(self) -> Optional[List[Path]]:
        return self.snapshot.files if self.snapshot is not None else None

    @property
    def last_directory_relative_name(self) -> str:
        return self.snapshot.relative_name if self.snapshot is not None else ""

    @property
    def on_menu(self) -> bool:
        return self.page is PageType.MENU

    def resolve(self, user_path: str) -> Path:
        """Resolve a path typed by the user against the root directory"""
        path = Path(user_path.strip()).expanduser()
        if not path.is_absolute():
            path = self.root_path / path
        return path.resolve()

    def reset_wizard(self) -> None:
        """Restart the current page's wizard from step 1"""
        self.step = 1
        self.awaiting_value = False
        self.file_extension = None
        self.snapshot = None

    def return_to_menu(self) -> None:
        """Reset wizard state and activate the menu"""
        self.reset_wizard()
        self.page = PageType.MENU


@dataclass
class BatchOp:
    """Single file operation of a batch"""
    src: Path                       # Source path (asset path for file creation)
    dst: Path                       # Destination path

    @property
    def is_same(self) -> bool:
        return self.src == self.dst


@dataclass
class BatchResult:
    """Batch transform execution result"""
    success: List[BatchOp] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    untouched: List[Path] = field(default_factory=list)   # Files never reached after an abort
    failed: Optional[Path] = None
    error: str = ""

    @property
    def aborted(self) -> bool:
        return self.failed is not None

    @property
    def success_count(self) -> int:
        return len(self.success)

    def abort(self, path: Path, error: str, remaining: List[Path]) -> None:
        """Record the file that stopped the batch"""
        self.failed = path
        self.error = error
        self.untouched = list(remaining)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Skipped: {len(self.skipped)}",
        ]
        if self.aborted:
            lines.append(f"  - Aborted at: {self.failed.name}: {self.error}")
            lines.append(f"  - Not processed: {len(self.untouched)}")
        return "\n".join(lines)
