"""
wizard - Multi-step console wizards

Value capture, wizard pages and command routing
"""

from .gate import capture
from .pages import (
    Outcome,
    Step,
    WizardPage,
    CreateFilePage,
    RemoveCharsPage,
    RemovePrefixPage,
    ChangeExtensionPage,
    CreateFilesPage,
    WIZARD_PAGES,
    return_to_menu,
    scan_into_session,
)
from .router import Router, CONTINUE_KEY

__all__ = [
    "capture",
    "Outcome",
    "Step",
    "WizardPage",
    "CreateFilePage",
    "RemoveCharsPage",
    "RemovePrefixPage",
    "ChangeExtensionPage",
    "CreateFilesPage",
    "WIZARD_PAGES",
    "return_to_menu",
    "scan_into_session",
    "Router",
    "CONTINUE_KEY",
]
