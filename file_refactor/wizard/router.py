"""
router.py - Command Routing

Sends every input line either to a global command or to a handler of the
current page. While a wizard step waits for a value, the line goes to the
page's continuation handler whatever its text is.
"""

from functools import partial
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple
import logging

from ..core import PageType, Session
from .console import clear_screen, highlight, print_help
from .pages import WIZARD_PAGES, WizardPage, return_to_menu

logger = logging.getLogger(__name__)

CONTINUE_KEY = "<continue>"

Handler = Callable[[str], None]


class Router:
    """Command dispatcher bound to one session"""

    def __init__(self, session: Session):
        self.session = session
        self.pages: Dict[PageType, WizardPage] = {}
        for page_class in WIZARD_PAGES:
            page = page_class()
            self.pages[page.page_type] = page

        self.global_commands: Mapping[str, Handler] = MappingProxyType({
            "quit": self.quit,
            "restart": self.restart,
            "clear": self.clear,
            "help": self.help,
            "commands": self.commands,
            "return": self.return_to_menu,
            "reset": self.reset,
        })

        table: Dict[Tuple[PageType, str], Handler] = {}
        for page in self.pages.values():
            table[(PageType.MENU, page.command)] = partial(self.enter, page)
            table[(page.page_type, CONTINUE_KEY)] = partial(self.advance, page)
        self.page_commands: Mapping[Tuple[PageType, str], Handler] = MappingProxyType(table)

    def dispatch(self, raw_line: str) -> None:
        """
        Handle one input line

        Args:
            raw_line: Line as typed; passed unchanged to a waiting wizard step
        """
        keyword = raw_line.strip()

        handler = self.global_commands.get(keyword)
        if handler is not None:
            handler(raw_line)
            return

        if self.session.awaiting_value:
            handler = self.page_commands.get((self.session.page, CONTINUE_KEY))
        elif keyword != CONTINUE_KEY:
            handler = self.page_commands.get((self.session.page, keyword))

        if handler is None:
            highlight(f"Command: '{keyword}' did not exist in the command map for page: {self.session.page.value}.")
            return

        logger.debug("Page %s handles %r", self.session.page.value, raw_line)
        handler(raw_line)

    def page_keywords(self, page: PageType) -> List[str]:
        """Commands of a page, without the continuation key"""
        return [keyword for (owner, keyword) in self.page_commands if owner is page and keyword != CONTINUE_KEY]

    # Page handlers

    def enter(self, page: WizardPage, line: str) -> None:
        page.enter(self.session)

    def advance(self, page: WizardPage, line: str) -> None:
        page.advance(self.session, line)

    # Global commands

    def quit(self, line: str) -> None:
        highlight("Quitting application...")
        self.session.exit_requested = True

    def restart(self, line: str) -> None:
        # TODO: restart the console loop with a fresh session
        highlight("To be added...")

    def clear(self, line: str) -> None:
        clear_screen()

    def help(self, line: str) -> None:
        print_help()

    def commands(self, line: str) -> None:
        page = self.session.page
        highlight(f"~~~ Commands for page: {page.value}\n")
        for keyword in self.page_keywords(page):
            print(keyword)
        print("help")
        highlight("\n~~~ End \n")

    def return_to_menu(self, line: str) -> None:
        return_to_menu(self.session)

    def reset(self, line: str) -> None:
        self.session.reset_wizard()
        page = self.pages.get(self.session.page)
        if page is None:
            highlight("Wizard state reset.")
            return
        highlight(f"Restarting: {page.title}")
        page.advance(self.session, "")
