"""Interactive menu flows."""

from typing import Optional, Sequence

from kanban.cli.tasks import DEFAULT_TASKS, Task
from kanban.cli.ui.base import MenuUI
from kanban.utils.constants import DEFAULT_TASK_PROMPT
from kanban.utils.exceptions import NoTasksAvailableError


def task_options(tasks: Sequence[Task]) -> list[dict]:
    """Menu options for the available tasks, highest priority first."""
    options = []
    for task in tasks:
        if not task.is_available():
            continue
        options.append(
            {
                "name": task.get_prompt() or task.name,
                "value": task.name,
                "priority": task.get_priority() or 1,
            }
        )
    return sorted(options, key=lambda option: -option["priority"])


def select_task(
    tasks: Sequence[Task],
    menu: MenuUI,
    prompt: str = DEFAULT_TASK_PROMPT,
) -> str:
    """Ask which task to run, then run it.

    Returns:
        Name of the task that ran

    Raises:
        NoTasksAvailableError: If no task is available
    """
    options = task_options(tasks)
    if not options:
        raise NoTasksAvailableError("No tasks available.")

    name = menu.ask(prompt, options)
    by_name = {task.name: task for task in tasks}
    by_name[name].run(menu)
    return name


def interactive_menu(menu: Optional[MenuUI] = None, tasks: Optional[Sequence[Task]] = None) -> str:
    """Main interactive menu."""
    from kanban.cli.ui.menu import PromptMenu

    return select_task(tasks if tasks is not None else DEFAULT_TASKS, menu or PromptMenu())
