"""Tests for task selection."""

import pytest

from kanban.cli.tasks import ExitTask
from kanban.cli.ui.interactive import interactive_menu, select_task, task_options
from kanban.utils.exceptions import NoTasksAvailableError
from tests.helpers.scripted import frames, make_menu


class RecordingTask:
    def __init__(self, name, prompt="", priority=1, available=True):
        self.name = name
        self.prompt = prompt
        self.priority = priority
        self.available = available
        self.runs = 0

    def is_available(self):
        return self.available

    def get_prompt(self):
        return self.prompt

    def get_priority(self):
        return self.priority

    def run(self, menu):
        self.runs += 1


def test_options_sorted_by_priority():
    tasks = [
        RecordingTask("showBacklog", "Backlog", priority=5),
        RecordingTask("exit", "Exit", priority=1),
        RecordingTask("continue", "Continue working on #12", priority=10),
        RecordingTask("release", "Release", priority=5),
    ]

    options = task_options(tasks)

    assert [o["value"] for o in options] == ["continue", "showBacklog", "release", "exit"]


def test_unavailable_tasks_are_hidden():
    tasks = [RecordingTask("a", "A"), RecordingTask("b", "B", available=False)]

    assert [o["name"] for o in task_options(tasks)] == ["A"]


def test_prompt_defaults_to_task_name():
    assert task_options([RecordingTask("showIssue")])[0]["name"] == "showIssue"


def test_select_task_runs_choice(mock_kanban_dir):
    backlog = RecordingTask("backlog", "Backlog", priority=5)
    exit_task = RecordingTask("exit", "Exit")
    menu = make_menu(["down", "return"])

    assert select_task([exit_task, backlog], menu) == "exit"
    assert exit_task.runs == 1
    assert backlog.runs == 0
    assert frames(menu)[0].startswith("What would you like to do? [Start typing")


def test_select_task_filtered(mock_kanban_dir):
    backlog = RecordingTask("backlog", "Backlog", priority=5)
    menu = make_menu(["►:set_line:ex", "►:submit"])

    assert select_task([backlog, ExitTask()], menu) == "exit"


def test_select_task_without_tasks(mock_kanban_dir):
    with pytest.raises(NoTasksAvailableError):
        select_task([RecordingTask("a", available=False)], make_menu())


def test_interactive_menu_defaults_to_exit(mock_kanban_dir):
    menu = make_menu(["return"])

    assert interactive_menu(menu) == "exit"
    assert "► Exit" in frames(menu)[0]
