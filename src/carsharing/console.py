"""Terminal input and menu output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from carsharing.schemas.company import Company


class InputReader:
    """Reads menu choices and company names from a line-oriented stream."""

    CHOICE_PROMPT = "Enter your choice: "
    NAME_PROMPT = "Enter the company name: "
    NOT_A_NUMBER = "Invalid input. Please enter a number."

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def _prompt(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.removesuffix("\n").removesuffix("\r")

    def read_choice(self) -> int:
        """
        Block until a line parses as an integer and return it.

        Unparseable lines are reported and the prompt is repeated.

        Raises:
            EOFError: If the input stream ends
        """
        while True:
            line = self._prompt(self.CHOICE_PROMPT)
            try:
                return int(line.strip())
            except ValueError:
                print(self.NOT_A_NUMBER, file=self.stdout)

    def read_name(self) -> str:
        """Return the next line as typed, without trimming or validation."""
        return self._prompt(self.NAME_PROMPT)


class MenuPrinter:
    """Writes menus and results to the output stream."""

    def __init__(self, stdout: TextIO | None = None) -> None:
        self.stdout = sys.stdout if stdout is None else stdout

    def _print(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def print_main_menu(self) -> None:
        self._print("1. Log in as a manager", "0. Exit")

    def print_manager_menu(self) -> None:
        self._print("1. Company list", "2. Create a company", "0. Back")

    def print_invalid_choice(self) -> None:
        self._print("Invalid choice. Please try again.")

    def print_company_list(self, companies: Sequence[Company]) -> None:
        """Print a 1-based numbered list in the order given."""
        self._print("Company list:")
        for index, company in enumerate(companies, start=1):
            self._print(f"{index}. {company.name}")

    def print_empty_list(self) -> None:
        self._print("The company list is empty!")

    def print_company_created(self) -> None:
        self._print("The company was created!")

    def print_company_not_created(self) -> None:
        self._print("Failed to create the company.")
