"""Parser for automation commands sent over the input channel.

A command line starts with the sentinel ``►:`` followed by a command name
and colon-separated arguments:

    ►:keypress:down       deliver the "down" key
    ►:keypress:a          type the character "a"
    ►:set_line:feat: x    replace the edit buffer with "feat: x"
    ►:submit              submit the current selection or line
"""

from __future__ import annotations

from typing import Optional

from kanban.core.events import InputEvent
from kanban.utils.constants import COMMAND_SENTINEL, Command, Key

# Key names accepted by keypress, with common aliases
_KEY_ALIASES = {
    "return": Key.RETURN,
    "enter": Key.RETURN,
    "up": Key.UP,
    "down": Key.DOWN,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "escape": Key.ESCAPE,
    "esc": Key.ESCAPE,
    "backspace": Key.BACKSPACE,
    "space": Key.CHAR,
}


def is_command(line: str) -> bool:
    """Check whether a raw input line is an automation command."""
    return line.startswith(COMMAND_SENTINEL)


def parse_key(name: str) -> InputEvent:
    """Turn a key name into a key event.

    Single printable characters are typed characters; anything else is a
    logical key name (unknown names pass through and act as no-ops).
    """
    alias = _KEY_ALIASES.get(name.lower())
    if alias == Key.CHAR:
        return InputEvent.char(" ")
    if alias is not None:
        return InputEvent.key(alias)
    if len(name) == 1 and name.isprintable():
        return InputEvent.char(name)
    return InputEvent.key(name.lower())


def parse_command(line: str) -> Optional[InputEvent]:
    """Parse one command line into an event.

    Args:
        line: Raw input line, with or without its trailing newline.

    Returns:
        The event, or None if the line is not a command or names an
        unknown command.
    """
    if not is_command(line):
        return None

    body = line[len(COMMAND_SENTINEL) :].rstrip("\r\n")
    command, _, argument = body.partition(":")

    if command == Command.KEYPRESS:
        if not argument:
            return None
        return parse_key(argument)
    if command == Command.SET_LINE:
        return InputEvent.set_line(argument)
    if command == Command.SUBMIT:
        return InputEvent.submit()
    return None
