"""Workflow tasks offered by the main menu.

A task decides whether it can run right now, how it is labelled and how
high it ranks. The tasks that carry workflow logic live with their callers;
this module only provides the protocol and the always-available exit task.
"""

from typing import Protocol

from kanban.cli.ui.base import MenuUI


class Task(Protocol):
    """A selectable workflow task."""

    name: str

    def is_available(self) -> bool:
        """Whether the task should be offered."""
        ...

    def get_prompt(self) -> str:
        """Label shown in the menu."""
        ...

    def get_priority(self) -> int:
        """Priority from 10 (highest) to 1 (lowest)."""
        ...

    def run(self, menu: MenuUI) -> None:
        """Execute the task."""
        ...


class ExitTask:
    """Leave the menu."""

    name = "exit"

    def is_available(self) -> bool:
        return True

    def get_prompt(self) -> str:
        return "Exit"

    def get_priority(self) -> int:
        return 1

    def run(self, menu: MenuUI) -> None:
        pass


DEFAULT_TASKS: list[Task] = [ExitTask()]
