"""Input events delivered to the prompt state machines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kanban.utils.constants import Key


class EventKind(Enum):
    """Types of input events."""

    KEY = "key"
    SET_LINE = "set_line"
    SUBMIT = "submit"


@dataclass(frozen=True)
class InputEvent:
    """One event from an input channel.

    KEY events carry a logical key name (see ``Key``); typed characters use
    ``Key.CHAR`` with the character in ``text``. SET_LINE events carry the
    replacement buffer in ``text``.
    """

    kind: EventKind
    name: str = ""
    text: str = ""

    @classmethod
    def key(cls, name: str) -> InputEvent:
        return cls(EventKind.KEY, name=name)

    @classmethod
    def char(cls, text: str) -> InputEvent:
        return cls(EventKind.KEY, name=Key.CHAR, text=text)

    @classmethod
    def set_line(cls, text: str) -> InputEvent:
        return cls(EventKind.SET_LINE, text=text)

    @classmethod
    def submit(cls) -> InputEvent:
        return cls(EventKind.SUBMIT)

    @property
    def is_submit(self) -> bool:
        """True for the submit command and the return key."""
        if self.kind is EventKind.SUBMIT:
            return True
        return self.kind is EventKind.KEY and self.name == Key.RETURN


class LineBuffer:
    """The live edit buffer behind the filter and free-text input."""

    def __init__(self, text: str = ""):
        self.text = text

    def set(self, text: str) -> bool:
        """Replace the buffer. Returns True if it changed."""
        changed = text != self.text
        self.text = text
        return changed

    def clear(self) -> bool:
        return self.set("")

    def apply(self, event: InputEvent) -> bool:
        """Apply an editing key. Returns True if the buffer changed."""
        if event.kind is EventKind.SET_LINE:
            return self.set(event.text)
        if event.kind is not EventKind.KEY:
            return False
        if event.name == Key.CHAR:
            self.text += event.text
            return bool(event.text)
        if event.name == Key.BACKSPACE and self.text:
            self.text = self.text[:-1]
            return True
        if event.name == Key.ESCAPE:
            return self.clear()
        return False
