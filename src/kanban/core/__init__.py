"""Core prompt logic: options, filtering, events and state machines."""

from kanban.core.command_parser import parse_command
from kanban.core.events import EventKind, InputEvent, LineBuffer
from kanban.core.filtering import filter_options
from kanban.core.options import Option, normalize_options
from kanban.core.state import PromptState, TextPromptState
from kanban.core.viewport import Viewport, calculate_visible_range

__all__ = [
    "EventKind",
    "InputEvent",
    "LineBuffer",
    "Option",
    "PromptState",
    "TextPromptState",
    "Viewport",
    "calculate_visible_range",
    "filter_options",
    "normalize_options",
    "parse_command",
]
