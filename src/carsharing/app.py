"""Interactive menu loop."""

from __future__ import annotations

from enum import Enum

from carsharing.console import InputReader, MenuPrinter
from carsharing.exceptions import StorageOperationFailed
from carsharing.logging_config import get_logger
from carsharing.store import CompanyStore

logger = get_logger(__name__)


class MenuState(str, Enum):
    """Menu state enumeration."""

    TOP_MENU = "top_menu"
    MANAGER_MENU = "manager_menu"
    TERMINATED = "terminated"


class CarSharingApp:
    """
    Top-level menu and manager sub-menu as a state machine.

    Top menu:      1 -> manager menu, 0 -> terminated
    Manager menu:  1 -> list companies, 2 -> create company, 0 -> top menu
    Any other integer leaves the state unchanged.
    """

    def __init__(self, store: CompanyStore, reader: InputReader, printer: MenuPrinter) -> None:
        self.store = store
        self.reader = reader
        self.printer = printer
        self.state = MenuState.TOP_MENU

    def run(self) -> None:
        """Drive the menus until the user exits or input ends."""
        while self.state is not MenuState.TERMINATED:
            self._show_menu()
            try:
                self.step(self.reader.read_choice())
            except EOFError:
                logger.info("input_closed", state=self.state.value)
                self.state = MenuState.TERMINATED

    def step(self, choice: int) -> MenuState:
        """Apply one menu choice and return the resulting state."""
        if self.state is MenuState.TOP_MENU:
            if choice == 1:
                self.state = MenuState.MANAGER_MENU
            elif choice == 0:
                self.state = MenuState.TERMINATED
            else:
                self.printer.print_invalid_choice()
        elif self.state is MenuState.MANAGER_MENU:
            if choice == 1:
                self.show_company_list()
            elif choice == 2:
                self.create_company()
            elif choice == 0:
                self.state = MenuState.TOP_MENU
            else:
                self.printer.print_invalid_choice()
        return self.state

    def show_company_list(self) -> None:
        try:
            companies = self.store.list_companies()
        except StorageOperationFailed as e:
            logger.error("company_list_failed", error=str(e))
            companies = []

        if not companies:
            self.printer.print_empty_list()
        else:
            self.printer.print_company_list(companies)

    def create_company(self) -> None:
        name = self.reader.read_name()
        if self.store.insert_company(name):
            self.printer.print_company_created()
        else:
            self.printer.print_company_not_created()

    def _show_menu(self) -> None:
        if self.state is MenuState.TOP_MENU:
            self.printer.print_main_menu()
        else:
            self.printer.print_manager_menu()
