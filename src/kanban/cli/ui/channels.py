"""Input channels feeding events to the prompt engine.

A terminal is read key by key with readchar. Anything else (a pipe, a file)
is read line by line: plain lines are typed followed by return, and lines
starting with the command sentinel are automation commands.
"""

import os
from collections import deque
from typing import IO, Optional, Protocol

import readchar

from kanban.core.command_parser import is_command, parse_command
from kanban.core.events import InputEvent
from kanban.utils.constants import Key
from kanban.utils.debug import DebugLog
from kanban.utils.exceptions import InputClosedError

# readchar key sequences -> logical key names
KEY_NAMES = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.PAGE_UP: Key.PAGE_UP,
    readchar.key.PAGE_DOWN: Key.PAGE_DOWN,
    readchar.key.ENTER: Key.RETURN,
    readchar.key.CR: Key.RETURN,
    readchar.key.LF: Key.RETURN,
    readchar.key.ESC: Key.ESCAPE,
    readchar.key.BACKSPACE: Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}

# Characters that turn a leading escape into an SS3 / CSI sequence
ESCAPE_INTRODUCERS = ("O", "[")


class InputChannel(Protocol):
    """Source of input events. One blocking read per event."""

    def read_event(self) -> InputEvent:
        """Block until the next event arrives."""
        ...


def key_to_event(key: str) -> InputEvent:
    """Translate a readchar key into an event."""
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    if key in KEY_NAMES:
        return InputEvent.key(KEY_NAMES[key])
    if len(key) == 1 and key.isprintable():
        return InputEvent.char(key)
    return InputEvent.key(repr(key))


class KeyboardChannel:
    """Reads keys from the controlling terminal.

    On POSIX, keys are assembled from ``readchar.readchar()`` the same way
    ``readchar.readkey()`` does, except that an escape followed by an
    ordinary character is split into an Escape press and that character.
    The character is held back for the next read. A lone Escape is therefore
    delivered when the next key arrives.
    """

    def __init__(self):
        self._held: Optional[str] = None

    def _next_char(self) -> str:
        if self._held is not None:
            char, self._held = self._held, None
            return char
        return readchar.readchar()

    def read_key(self) -> str:
        """Block until a full key (or escape sequence) has been read."""
        if os.name == "nt":
            return readchar.readkey()

        c1 = self._next_char()
        if c1 != readchar.key.ESC:
            return c1

        c2 = readchar.readchar()
        if c2 not in ESCAPE_INTRODUCERS:
            self._held = c2
            return c1

        c3 = readchar.readchar()
        if c3 not in "\x31\x32\x33\x35\x36":
            return c1 + c2 + c3

        c4 = readchar.readchar()
        if c4 not in "\x30\x31\x33\x34\x35\x37\x38\x39":
            return c1 + c2 + c3 + c4

        return c1 + c2 + c3 + c4 + readchar.readchar()

    def read_event(self) -> InputEvent:
        return key_to_event(self.read_key())


class StreamChannel:
    """Reads newline-delimited input from a non-terminal stream."""

    def __init__(self, stream: IO[str], log: Optional[DebugLog] = None):
        self.stream = stream
        self.log = log
        self._pending: deque[InputEvent] = deque()

    def _queue_line(self, line: str):
        if is_command(line):
            event = parse_command(line)
            if event is None:
                if self.log:
                    self.log.debug_command("Ignored command", line=line.rstrip())
                return
            if self.log:
                self.log.debug_command("Command", kind=event.kind.value, name=event.name)
            self._pending.append(event)
            return

        for char in line.rstrip("\r\n"):
            self._pending.append(InputEvent.char(char))
        self._pending.append(InputEvent.key(Key.RETURN))

    def read_event(self) -> InputEvent:
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise InputClosedError("Input closed while waiting for an answer")
            self._queue_line(line)
        return self._pending.popleft()


def open_channel(stream: IO[str], log: Optional[DebugLog] = None) -> InputChannel:
    """Pick the channel for a stream: keyboard for a tty, lines otherwise."""
    if stream.isatty():
        return KeyboardChannel()
    return StreamChannel(stream, log=log)
