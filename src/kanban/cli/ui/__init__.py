"""UI components for interactive CLI."""

from kanban.cli.ui.base import MenuUI
from kanban.cli.ui.channels import KeyboardChannel, StreamChannel, open_channel
from kanban.cli.ui.menu import PromptMenu, ask, ask_file_input
from kanban.cli.ui.panels import console, get_terminal_size, write_frame

__all__ = [
    "MenuUI",
    "KeyboardChannel",
    "PromptMenu",
    "StreamChannel",
    "ask",
    "ask_file_input",
    "console",
    "get_terminal_size",
    "open_channel",
    "write_frame",
]
