"""Interactive text menu over a RosterStore.

Parses the commands add, remove, view, view details, exit and turns each into
calls against the store. Every message goes through a Rich console; input comes
from a `read(prompt)` callable so the loop can be scripted.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from roster.models import Status, Student
from roster.store import RosterStore

logger = logging.getLogger(__name__)

OPTIONS = ("Add", "Remove", "View", "View Details", "Exit")

Reader = Callable[[str], str]

# Optional sign, ASCII digits only (no "1_0", no non-ASCII numerals)
_AGE_PATTERN = re.compile(r"[+-]?[0-9]+")


class RosterMenu:
    """Console adapter: one instance per interactive session."""

    def __init__(
        self,
        store: RosterStore,
        console: Console,
        read: Optional[Reader] = None,
    ) -> None:
        self.store = store
        self.console = console
        self._read = read or console.input
        self._commands: dict[str, Callable[[], None]] = {
            "add": self.add_student,
            "remove": self.remove_student,
            "view": self.view_students,
            "view details": self.view_student_details,
        }

    def run(self) -> None:
        """Print the banner and loop until 'exit' or end of input."""
        self.console.print("[bold]Welcome to the Student Management Console[/bold]\n")
        self.console.print(f"Options: {', '.join(OPTIONS)}")

        while True:
            try:
                choice = self._read("\nEnter your choice: ")
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving menu")
                self.console.print("\nExiting... Goodbye!")
                return
            if not self.dispatch(choice):
                return

    def dispatch(self, choice: str) -> bool:
        """Run one command. Returns False when the session should end."""
        command = " ".join(choice.split()).lower()
        if command == "exit":
            self.console.print("Exiting... Goodbye!")
            return False

        handler = self._commands.get(command)
        if handler is None:
            self.console.print("[yellow]Invalid choice. Please try again.[/yellow]")
            return True

        try:
            handler()
        except (EOFError, KeyboardInterrupt):
            # Abandon the half-entered command, keep the session
            self.console.print("\n[yellow]Cancelled.[/yellow]")
        return True

    # --- Commands ---

    def add_student(self) -> None:
        class_name = self._ask("Enter class name (e.g., A1): ", "class name")
        if class_name is None:
            return
        student_name = self._ask("Enter student name: ", "student name")
        if student_name is None:
            return

        raw_age = self._read("Enter student age: ").strip()
        if not _AGE_PATTERN.fullmatch(raw_age):
            self.console.print("[red]Invalid student age input.[/red]")
            return
        age = int(raw_age)

        self.store.add_student(class_name, Student(name=student_name, age=age))
        self.console.print("[green]Student added successfully![/green]")

    def remove_student(self) -> None:
        class_name = self._ask("Enter class name (e.g., A1): ", "class name")
        if class_name is None:
            return
        student_name = self._ask("Enter student name to remove: ", "student name")
        if student_name is None:
            return

        result = self.store.remove_student(class_name, student_name)
        if result.status is Status.CLASS_NOT_FOUND:
            self._class_not_found(class_name)
        elif result.status is Status.STUDENT_NOT_FOUND:
            self.console.print(
                f"[red]{escape(student_name)} not found in {escape(class_name)} class[/red]"
            )
        else:
            self.console.print(
                f"[green]Removed {escape(result.value.name)} from {escape(class_name)}.[/green]"
            )

    def view_students(self) -> None:
        class_name = self._ask("Enter class name (e.g., A1): ", "class name")
        if class_name is None:
            return

        result = self.store.get_all_students_by_class(class_name)
        if result.status is Status.CLASS_NOT_FOUND:
            self._class_not_found(class_name)
        if not result.value:
            self.console.print("No students found in this class.")
            return

        self.console.print(f"Students in {escape(class_name)}:")
        for student in result.value:
            self.console.print(f"- {escape(student.describe())}")

    def view_student_details(self) -> None:
        class_name = self._ask("Enter class name (e.g., A1): ", "class name")
        if class_name is None:
            return
        student_name = self._ask("Enter student name: ", "student name")
        if student_name is None:
            return

        result = self.store.get_student_by_name_and_class(class_name, student_name)
        if result.status is Status.CLASS_NOT_FOUND:
            self._class_not_found(class_name)
        if result.found:
            self.console.print(f"Student Details: {escape(result.value.describe())}")
        else:
            self.console.print("No student found with the given details.")

    # --- Helpers ---

    def _ask(self, prompt: str, field: str) -> Optional[str]:
        """Read a required free-text answer. None (after a message) if blank."""
        answer = self._read(prompt)
        if not answer or not answer.strip():
            self.console.print(f"[red]Invalid {field} input.[/red]")
            return None
        return answer

    def _class_not_found(self, class_name: str) -> None:
        self.console.print(f"[red]{escape(class_name)} class is not found in the system.[/red]")
