"""Interactive console session for taskpad.

The session is the only layer that talks to the user: it shows the menu,
reads and validates raw input, calls one :class:`TaskManager` operation and
prints the outcome. Invalid input is reported and the action skipped; it
never reaches the manager.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

import click
from rich.console import Console
from rich.text import Text

from taskpad.config import TaskpadConfig
from taskpad.formatting import (
    divider,
    format_percentage,
    format_timestamp,
    productivity_message,
)
from taskpad.manager import TaskManager
from taskpad.models import Priority, Task, TaskFilter

logger = logging.getLogger(__name__)

MENU_OPTIONS: list[str] = [
    "Add Task",
    "Remove Task",
    "Complete Task",
    "List Tasks",
    "Search Tasks",
    "Show Statistics",
    "Exit",
]

PRIORITY_CHOICES: dict[str, Priority] = {
    "1": Priority.LOW,
    "2": Priority.MEDIUM,
    "3": Priority.HIGH,
}

FILTER_CHOICES: dict[str, TaskFilter] = {
    "1": TaskFilter.ALL,
    "2": TaskFilter.COMPLETED,
    "3": TaskFilter.PENDING,
    "4": TaskFilter.HIGH_PRIORITY,
}

FAREWELL = "Thank you for using the Task Manager!"

# Task ids are plain ASCII decimal integers within 32-bit signed range
TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
TASK_ID_MIN = -(2**31)
TASK_ID_MAX = 2**31 - 1


def parse_task_id(raw: str) -> int | None:
    """Parse a task ID typed by the user, or None if it is not an integer."""
    text = raw.strip()
    if not TASK_ID_PATTERN.fullmatch(text):
        return None

    value = int(text)
    if not TASK_ID_MIN <= value <= TASK_ID_MAX:
        return None
    return value


def parse_priority(raw: str) -> Priority | None:
    """Map a priority menu selection (1-3) to a Priority."""
    return PRIORITY_CHOICES.get(raw.strip())


def parse_filter(raw: str) -> TaskFilter | None:
    """Map a filter menu selection (1-4) to a TaskFilter."""
    return FILTER_CHOICES.get(raw.strip())


class TaskSession:
    """Menu-driven read/dispatch/print loop around a TaskManager."""

    def __init__(
        self,
        manager: TaskManager | None = None,
        console: Console | None = None,
        config: TaskpadConfig | None = None,
    ) -> None:
        self.manager = manager if manager is not None else TaskManager()
        self.console = console if console is not None else Console()
        self.config = config if config is not None else TaskpadConfig()
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.remove_task,
            "3": self.complete_task,
            "4": self.list_tasks,
            "5": self.search_tasks,
            "6": self.show_statistics,
        }

    def run(self) -> None:
        """Run the session until the user exits or input ends."""
        self._print(Text(f"Welcome to the {self.config.app_name}!", style="bold"))
        self._print(divider("=", self.config.display.banner_width))

        try:
            while True:
                self._show_menu()
                choice = self._ask(f"Enter your choice (1-{len(MENU_OPTIONS)})").strip()

                if choice == str(len(MENU_OPTIONS)):
                    break

                action = self._actions.get(choice)
                if action is None:
                    logger.debug("Rejected menu choice %r", choice)
                    self._print("[red]Invalid choice. Please try again.[/red]")
                else:
                    action()

                self._print()
                self._ask("Press Enter to continue...", suffix="")
        except click.Abort:
            # End of input (or Ctrl-C) at any prompt ends the session
            self._print()

        self._print(FAREWELL)

    # Actions

    def add_task(self) -> None:
        """Prompt for a new task and add it."""
        self._section("ADD NEW TASK")

        title = self._ask("Enter task title").strip()
        if not title:
            logger.debug("Rejected empty title")
            self._print("[red]Title cannot be empty![/red]")
            return

        description = self._ask("Enter task description").strip()

        self._print()
        self._print("Select priority:")
        for key, priority in PRIORITY_CHOICES.items():
            self._print(f"{key}. {priority.label}")
        raw = self._ask(f"Enter priority (1-{len(PRIORITY_CHOICES)})")

        priority = parse_priority(raw)
        if priority is None:
            logger.debug("Rejected priority choice %r", raw)
            self._print("[yellow]Invalid priority choice. Defaulting to Medium.[/yellow]")
            priority = Priority.MEDIUM

        task = self.manager.add_task(title, description, priority)
        self._print(f"[green]Task added successfully![/green] (ID: {task.id})")

    def remove_task(self) -> None:
        """Prompt for a task ID and remove that task."""
        self._section("REMOVE TASK")

        task_id = self._ask_task_id("Enter task ID to remove")
        if task_id is None:
            return

        if self.manager.remove_task(task_id):
            self._print(f"[green]Task '{task_id}' removed successfully![/green]")
        else:
            self._print(f"[red]Task with ID '{task_id}' not found![/red]")

    def complete_task(self) -> None:
        """Prompt for a task ID and mark that task completed."""
        self._section("COMPLETE TASK")

        task_id = self._ask_task_id("Enter task ID to complete")
        if task_id is None:
            return

        if self.manager.complete_task(task_id):
            self._print(f"[green]Task '{task_id}' marked as completed![/green]")
        else:
            self._print(f"[red]Task with ID '{task_id}' not found![/red]")

    def list_tasks(self) -> None:
        """Prompt for a filter and print the matching tasks."""
        self._section("LIST TASKS")
        for key, task_filter in FILTER_CHOICES.items():
            self._print(f"{key}. {task_filter.label}")
        raw = self._ask(f"Select filter (1-{len(FILTER_CHOICES)})")

        task_filter = parse_filter(raw)
        if task_filter is None:
            logger.debug("Rejected filter choice %r", raw)
            self._print("[yellow]Invalid choice. Showing all tasks.[/yellow]")
            task_filter = TaskFilter.ALL

        tasks = self.manager.list_tasks(task_filter)
        if not tasks:
            self._print("No tasks found for the selected filter.")
            return

        display = self.config.display
        self._print()
        self._print(f"[bold]Task List ({len(tasks)} tasks):[/bold]")
        self._print(divider("=", display.divider_width))

        for number, task in enumerate(tasks, 1):
            self._print_task(number, task)
            created = format_timestamp(task.created_at, display.date_format)
            self._print(Text(f"   Created: {created}"))
            self._print(f"   ID: {task.id}")
            self._print(divider("-", display.item_width))

    def search_tasks(self) -> None:
        """Prompt for a query and print the matching tasks."""
        self._section("SEARCH TASKS")

        query = self._ask("Enter search query").strip()
        if not query:
            logger.debug("Rejected empty search query")
            self._print("[red]Search query cannot be empty![/red]")
            return

        results = self.manager.search_tasks(query)
        if not results:
            self._print(Text(f"No tasks found matching '{query}'"))
            return

        self._print(Text(f"Found {len(results)} task(s) matching '{query}':"))
        self._print(divider("=", self.config.display.banner_width))
        for number, task in enumerate(results, 1):
            self._print_task(number, task)
            self._print(divider("-", self.config.display.section_width))

    def show_statistics(self) -> None:
        """Print aggregate counts and a completion summary."""
        self._section("TASK STATISTICS")

        stats = self.manager.get_statistics()
        self._print("[bold]Task Overview:[/bold]")
        self._print(f"   Total Tasks: {stats.total_tasks}")
        self._print(f"   Completed: {stats.completed_tasks}")
        self._print(f"   Pending: {stats.pending_tasks}")
        self._print(f"   High Priority: {stats.high_priority_tasks}")
        self._print(f"   Completion Rate: {format_percentage(stats.completion_percentage)}")
        self._print(f"   Status: {productivity_message(stats.completion_percentage)}")

    # Helpers

    def _show_menu(self) -> None:
        width = self.config.display.divider_width
        self._print()
        self._print(divider("=", width))
        self._print("[bold]TASK MANAGER MENU[/bold]")
        self._print(divider("=", width))
        for number, label in enumerate(MENU_OPTIONS, 1):
            self._print(f"{number}. {label}")
        self._print(divider("=", width))

    def _section(self, title: str) -> None:
        self._print()
        self._print(f"[bold]{title}[/bold]")
        self._print(divider("-", self.config.display.section_width))

    def _print_task(self, number: int, task: Task) -> None:
        self._print(Text(f"{number}. {task.display_title}"))
        self._print(Text(f"   Description: {task.description}"))
        self._print(f"   Priority: {task.status}")

    def _ask_task_id(self, text: str) -> int | None:
        raw = self._ask(text)
        task_id = parse_task_id(raw)
        if task_id is None:
            logger.debug("Rejected task ID %r", raw)
            self._print("[red]Invalid task ID![/red]")
        return task_id

    def _ask(self, text: str, suffix: str = ": ") -> str:
        """Read one line; an empty line is returned as an empty string."""
        return click.prompt(text, default="", show_default=False, prompt_suffix=suffix)

    def _print(self, text: str | Text = "") -> None:
        """Print a line; plain strings may carry markup, Text is printed as-is."""
        self.console.print(text, highlight=False, emoji=False, soft_wrap=True)
