"""
pages.py - Wizard Pages

Every page other than the menu is a wizard: an ordered list of steps, each
asking for one value through the capture gate. advance() feeds one input
line into the wizard and keeps going until a step needs another line or the
page is left.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional
import logging

from ..core import (
    BatchResult,
    PageType,
    ScanError,
    Session,
    check_directory,
    check_new_file,
    check_template,
    create_file,
    execute_change_extension,
    execute_create_files,
    execute_remove_chars,
    execute_remove_prefix,
    change_extension_namer,
    is_affirmative,
    normalize_extension,
    preview,
    remove_chars_namer,
    remove_prefix_namer,
    resolve_directory,
    scan_tree,
    template_output_namer,
)
from .console import highlight, print_header
from .gate import capture

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 15


class Outcome(Enum):
    """Result of feeding a line into a wizard"""
    AWAITING = "awaiting"           # A prompt is shown, the next line is its value
    TRANSITIONED = "transitioned"   # The wizard left its page


@dataclass(frozen=True)
class Step:
    """One value a wizard asks for"""
    prompt: str
    success: str
    handle: Callable[[Session, str], bool]   # False once the page has been left


def return_to_menu(session: Session) -> None:
    """Leave the current page for the menu"""
    if session.on_menu:
        highlight("Already on the menu.")
        return
    session.return_to_menu()
    highlight("Returned to the menu.")


def abort(session: Session, message: str) -> bool:
    """Report a validation error and go back to the menu"""
    highlight(message)
    return_to_menu(session)
    return False


def scan_into_session(session: Session) -> bool:
    """
    Scan the chosen directory for files with the session's extension

    Only the last visited directory is kept in the session.

    Returns:
        Whether the wizard can go on
    """
    try:
        snapshots = scan_tree(session.root_path, session.directory_suffix, session.file_extension)
    except ScanError as e:
        return abort(session, str(e))

    snapshot = snapshots[-1]
    if len(snapshots) > 1:
        logger.debug("Scanned %d directories, keeping '%s'", len(snapshots), snapshot.relative_name)
    session.snapshot = snapshot

    if not snapshot.files:
        return abort(session, f"No matching files found in {snapshot.directory}")

    print(f"Found {len(snapshot)} files in {snapshot.directory}:")
    for path in snapshot.files[:PREVIEW_LIMIT]:
        print(f"  - {snapshot.display_name(path)}")
    if len(snapshot) > PREVIEW_LIMIT:
        print(f"  ... and {len(snapshot) - PREVIEW_LIMIT} more files")
    return True


def parse_count(value: str) -> Optional[int]:
    """Parse a non-negative integer, None when invalid"""
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number >= 0 else None


def print_preview(session: Session, namer) -> None:
    """Show what the batch is going to do"""
    snapshot = session.snapshot
    rows = preview(snapshot.files, namer)
    print(f"\nWill process {len(rows)} files:")
    print("-" * 70)
    for src, dst, error in rows[:PREVIEW_LIMIT]:
        source = snapshot.display_name(src)
        if error:
            print(f"  {source:<30} !! {error}")
        else:
            print(f"  {source:<30} -> {dst.name}")
    if len(rows) > PREVIEW_LIMIT:
        print(f"  ... and {len(rows) - PREVIEW_LIMIT} more files")
    print("-" * 70)


def print_progress(current: int, total: int, message: str) -> None:
    """Show one line per file while a batch runs"""
    print(f"  [{current}/{total}] {message}")


def report(session: Session, result: BatchResult) -> bool:
    """Print a batch result and go back to the menu"""
    print()
    print(result.summary())
    if result.aborted:
        highlight(f"Batch stopped at {result.failed.name}, remaining files were not changed.")
    return_to_menu(session)
    return False


class WizardPage:
    """Base class of the wizard pages"""

    page_type: PageType
    command: str
    title: str
    description: str

    def __init__(self):
        self.steps: List[Step] = self.build_steps()

    def build_steps(self) -> List[Step]:
        raise NotImplementedError

    def enter(self, session: Session) -> Outcome:
        """Switch to this page and show the first prompt"""
        session.page = self.page_type
        session.reset_wizard()
        print_header(self.title)
        print(self.description)
        return self.advance(session, "")

    def advance(self, session: Session, line: str) -> Outcome:
        """
        Feed one input line into the wizard

        Args:
            session: Current session
            line: Input line; only used when a step is waiting for a value

        Returns:
            AWAITING when a prompt waits for the next line, TRANSITIONED
            when the page was left
        """
        value = line
        while session.page is self.page_type:
            index = session.step - 1
            if index >= len(self.steps):
                return_to_menu(session)
                break

            step = self.steps[index]
            captured = capture(session, value, step.prompt, step.success)
            if captured is None:
                return Outcome.AWAITING

            value = ""
            if not step.handle(session, captured):
                break

        return Outcome.TRANSITIONED

    # Steps shared by the pages

    def directory_step(self, prompt: str = "Enter the directory, relative to the root (empty for the root):") -> Step:
        return Step(prompt, "Directory set to: '{value}'", self.set_directory)

    def extension_step(self, prompt: str = "Enter the extension of the files to change (e.g. png):") -> Step:
        return Step(prompt, "Extension set to: '{value}'", self.set_extension)

    def confirm_step(self, run: Callable[[Session], bool]) -> Step:
        def handle(session: Session, answer: str) -> bool:
            if not is_affirmative(answer):
                highlight("Cancelled.")
                return_to_menu(session)
                return False
            print("\nExecuting...")
            return run(session)
        return Step("Apply the changes? (y/N)", "Answer: '{value}'", handle)

    def set_directory(self, session: Session, value: str) -> bool:
        session.directory_suffix = value
        return True

    def set_extension(self, session: Session, value: str) -> bool:
        extension = normalize_extension(value)
        if not extension:
            return abort(session, "Extension cannot be empty.")
        session.file_extension = extension
        return scan_into_session(session)


class CreateFilePage(WizardPage):
    """Create one empty file"""

    page_type = PageType.CREATE_FILE
    command = "cfile"
    title = "Creating a file"
    description = "Welcome to the menu for creating a file!"

    def build_steps(self) -> List[Step]:
        return [
            self.directory_step("Enter the directory for the new file, relative to the root (empty for the root):"),
            Step("Enter the file name (e.g. Notes.txt):", "File name set to: '{value}'", self.set_file_name),
            self.confirm_step(self.run),
        ]

    def set_directory(self, session: Session, value: str) -> bool:
        session.directory_suffix = value
        valid, error = check_directory(resolve_directory(session.root_path, value))
        if not valid:
            return abort(session, error)
        return True

    def target(self, session: Session) -> Path:
        return resolve_directory(session.root_path, session.directory_suffix) / session.file_name

    def set_file_name(self, session: Session, value: str) -> bool:
        name = value.strip()
        if not name:
            return abort(session, "File name cannot be empty.")
        session.file_name = name
        valid, error = check_new_file(self.target(session))
        if not valid:
            return abort(session, error)
        print(f"Will create: {self.target(session)}")
        return True

    def run(self, session: Session) -> bool:
        path = self.target(session)
        try:
            create_file(path)
        except OSError as e:
            highlight(f"Could not create {path}: {e}")
        else:
            print(f"Created {path}")
        return_to_menu(session)
        return False


class RemoveCharsPage(WizardPage):
    """Remove a range of characters from the names of N files"""

    page_type = PageType.REMOVE_CHARS
    command = "refnfiles"
    title = "Removing characters from file names"
    description = "Removes a number of characters at a position from every matching file name."

    def build_steps(self) -> List[Step]:
        return [
            self.directory_step(),
            self.extension_step(),
            Step("Enter the zero-based position of the first character to remove:",
                 "Offset set to: {value}", self.set_offset),
            Step("Enter the number of characters to remove:",
                 "Length set to: {value}", self.set_length),
            self.confirm_step(self.run),
        ]

    def set_offset(self, session: Session, value: str) -> bool:
        offset = parse_count(value)
        if offset is None:
            return abort(session, f"Offset must be a non-negative whole number, got '{value}'.")
        session.refactor_offset = offset
        return True

    def set_length(self, session: Session, value: str) -> bool:
        length = parse_count(value)
        if length is None:
            return abort(session, f"Length must be a non-negative whole number, got '{value}'.")
        session.refactor_trim_length = length
        print_preview(session, remove_chars_namer(session.snapshot, session.refactor_offset, length))
        return True

    def run(self, session: Session) -> bool:
        result = execute_remove_chars(
            session.snapshot, session.refactor_offset, session.refactor_trim_length, print_progress
        )
        return report(session, result)


class RemovePrefixPage(WizardPage):
    """Remove the span from a string up to the extension from N file names"""

    page_type = PageType.REMOVE_PREFIX
    command = "remnameprefixes"
    title = "Removing name prefixes"
    description = "Removes everything from a string up to the extension in every matching file name."

    def build_steps(self) -> List[Step]:
        return [
            self.directory_step(),
            self.extension_step(),
            Step("Enter the string where the removed part starts:",
                 "String set to: '{value}'", self.set_target),
            self.confirm_step(self.run),
        ]

    def set_target(self, session: Session, value: str) -> bool:
        if not value:
            return abort(session, "The string cannot be empty.")
        session.target_string = value
        print_preview(session, remove_prefix_namer(session.snapshot, value, session.file_extension))
        return True

    def run(self, session: Session) -> bool:
        result = execute_remove_prefix(
            session.snapshot, session.target_string, session.file_extension, print_progress
        )
        return report(session, result)


class ChangeExtensionPage(WizardPage):
    """Change the extension of N files"""

    page_type = PageType.CHANGE_EXTENSION
    command = "refext"
    title = "Changing file extensions"
    description = "Replaces the extension of every matching file."

    def build_steps(self) -> List[Step]:
        return [
            self.directory_step(),
            self.extension_step("Enter the current extension (e.g. txt):"),
            Step("Enter the new extension (e.g. md):", "New extension set to: '{value}'", self.set_new_extension),
            self.confirm_step(self.run),
        ]

    def set_new_extension(self, session: Session, value: str) -> bool:
        extension = normalize_extension(value)
        if not extension:
            return abort(session, "Extension cannot be empty.")
        session.new_extension = extension
        print_preview(session, change_extension_namer(session.snapshot, session.file_extension, extension))
        return True

    def run(self, session: Session) -> bool:
        result = execute_change_extension(
            session.snapshot, session.file_extension, session.new_extension, print_progress
        )
        return report(session, result)


class CreateFilesPage(WizardPage):
    """Create one file per asset from a template"""

    page_type = PageType.CREATE_FILES
    command = "cfiles"
    title = "Creating files from a template"
    description = (
        "Creates one file per asset. In the template, REPLACE_EXT becomes the asset file name,\n"
        "REPLACE_CLS and REPLACE_CTOR become the asset name without extension."
    )

    def build_steps(self) -> List[Step]:
        return [
            Step("Enter the template file path (absolute or relative to the root):",
                 "Template set to: '{value}'", self.set_template),
            self.directory_step("Enter the asset directory, relative to the root (empty for the root):"),
            self.extension_step("Enter the asset extension (e.g. png):"),
            Step("Enter the extension of the files to create (e.g. cs):",
                 "New extension set to: '{value}'", self.set_new_extension),
            Step("Enter the output directory (absolute or relative to the root):",
                 "Output directory set to: '{value}'", self.set_output_directory),
            self.confirm_step(self.run),
        ]

    def set_template(self, session: Session, value: str) -> bool:
        path = session.resolve(value)
        valid, error = check_template(path)
        if not valid:
            return abort(session, error)
        session.template_path = path
        return True

    def set_new_extension(self, session: Session, value: str) -> bool:
        extension = normalize_extension(value)
        if not extension:
            return abort(session, "Extension cannot be empty.")
        session.new_extension = extension
        return True

    def set_output_directory(self, session: Session, value: str) -> bool:
        path = session.resolve(value)
        valid, error = check_directory(path)
        if not valid:
            return abort(session, error)
        session.output_directory = path
        print_preview(session, template_output_namer(path, session.file_extension, session.new_extension))
        return True

    def run(self, session: Session) -> bool:
        result = execute_create_files(
            session.snapshot,
            session.template_path,
            session.file_extension,
            session.new_extension,
            session.output_directory,
            print_progress,
        )
        return report(session, result)


WIZARD_PAGES = (
    CreateFilePage,
    RemoveCharsPage,
    RemovePrefixPage,
    ChangeExtensionPage,
    CreateFilesPage,
)
