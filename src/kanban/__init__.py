"""kanban - Interactive prompts for branch and issue workflows."""

from importlib.metadata import version

__version__ = version("kanban-prompt")

from kanban.cli.ui.menu import PromptMenu, ask, ask_file_input
from kanban.core.options import Option

__all__ = [
    "Option",
    "PromptMenu",
    "ask",
    "ask_file_input",
]
