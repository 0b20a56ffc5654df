"""Prompt state machines.

Both machines consume ``InputEvent`` objects one at a time through
``handle()``, which returns True once the prompt is complete. Real key
presses and injected automation commands go through the same path.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kanban.core.events import EventKind, InputEvent, LineBuffer
from kanban.core.filtering import filter_options
from kanban.core.options import Option
from kanban.core.viewport import Viewport, calculate_visible_range
from kanban.utils.constants import Key


class PromptState:
    """Selection state of a prompt with options."""

    def __init__(
        self,
        question: str,
        options: Sequence[Option],
        rows: int,
        columns: int,
    ):
        if not options:
            raise ValueError("PromptState needs at least one option")
        self.question_lines = question.split("\n")
        self.options = list(options)
        self.viewport = Viewport.compute(
            rows, columns, len(self.question_lines), len(self.options)
        )
        self.line = LineBuffer()
        self.filter_text = ""
        self.filtered_options = list(self.options)
        self.selected_index = 0
        self.question_offset = 0
        self.done = False

    @property
    def selected(self) -> Option:
        return self.filtered_options[self.selected_index]

    @property
    def value(self) -> Any:
        """Value of the selected option."""
        return self.selected.value

    def visible_question(self) -> list[str]:
        return self.viewport.question_slice(self.question_lines, self.question_offset)

    def visible_options(self) -> list[tuple[int, Option]]:
        """(index, option) pairs inside the option window."""
        start, end = calculate_visible_range(
            self.selected_index, len(self.filtered_options)
        )
        return [(i, self.filtered_options[i]) for i in range(start, end)]

    def refilter(self):
        """Recompute the filtered list from the edit buffer."""
        self.filter_text = self.line.text
        self.filtered_options = filter_options(self.options, self.filter_text)
        self.selected_index = 0

    def move_up(self):
        if self.selected_index == 0:
            self.selected_index = len(self.filtered_options) - 1
        else:
            self.selected_index -= 1

    def move_down(self):
        if self.selected_index == len(self.filtered_options) - 1:
            self.selected_index = 0
        else:
            self.selected_index += 1

    def scroll_question(self, delta: int):
        """Scroll the question window; no-op unless it overflows."""
        if not self.viewport.scrollbar:
            return
        ceiling = self.viewport.max_question_offset(len(self.question_lines))
        self.question_offset = min(ceiling, max(0, self.question_offset + delta))

    def handle(self, event: InputEvent) -> bool:
        """Apply one event. Returns True when the prompt is submitted."""
        if event.is_submit:
            self.done = True
            return True

        if event.kind is EventKind.SET_LINE:
            self.line.set(event.text)
            self.refilter()
        elif event.name == Key.UP:
            self.move_up()
        elif event.name == Key.DOWN:
            self.move_down()
        elif event.name == Key.PAGE_UP:
            self.scroll_question(-1)
        elif event.name == Key.PAGE_DOWN:
            self.scroll_question(1)
        elif event.name == Key.ESCAPE:
            self.line.clear()
            self.refilter()
        elif self.line.apply(event):
            self.refilter()
        return False


class TextPromptState:
    """State of a free-text prompt. Empty answers are never accepted."""

    def __init__(self, question: str):
        self.question = question
        self.line = LineBuffer()
        self.done = False

    @property
    def value(self) -> str:
        return self.line.text

    def handle(self, event: InputEvent) -> bool:
        """Apply one event. Returns True when a non-empty line is submitted."""
        if event.is_submit:
            if self.line.text:
                self.done = True
                return True
            return False
        self.line.apply(event)
        return False
