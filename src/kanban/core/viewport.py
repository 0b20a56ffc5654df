"""Viewport sizing for the question text and the option list."""

from __future__ import annotations

from dataclasses import dataclass

from kanban.utils.constants import (
    MAX_RESERVED_ROWS,
    MIN_QUESTION_ROWS,
    OPTION_ANCHOR_OFFSET,
    OPTION_CHROME_ROWS,
    OPTION_WINDOW_ROWS,
)


@dataclass(frozen=True)
class Viewport:
    """Visible space for one prompt.

    Attributes:
        rows: Terminal height
        columns: Terminal width
        question_rows: Lines of question text shown at once
        scrollbar: Whether the question is taller than its window
    """

    rows: int
    columns: int
    question_rows: int
    scrollbar: bool

    @classmethod
    def compute(
        cls,
        rows: int,
        columns: int,
        question_line_count: int,
        option_count: int,
    ) -> Viewport:
        """Size the question window, reserving room for the option list.

        At most MAX_RESERVED_ROWS rows are reserved for the options and hints,
        and the question always keeps at least MIN_QUESTION_ROWS rows.
        """
        reserved = min(MAX_RESERVED_ROWS, option_count + OPTION_CHROME_ROWS)
        question_rows = max(MIN_QUESTION_ROWS, rows - reserved)
        return cls(
            rows=rows,
            columns=columns,
            question_rows=question_rows,
            scrollbar=question_line_count > question_rows,
        )

    def max_question_offset(self, question_line_count: int) -> int:
        """Largest scroll offset that still fills the question window."""
        return max(0, question_line_count - self.question_rows)

    def question_slice(self, lines: list[str], offset: int) -> list[str]:
        """Question lines visible at a scroll offset."""
        return lines[offset : offset + self.question_rows]


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int = OPTION_WINDOW_ROWS,
) -> tuple[int, int]:
    """Calculate the visible window of the option list.

    The window starts OPTION_ANCHOR_OFFSET rows above the cursor (or at the
    top), which keeps the selection near the middle once it moves past the
    first few items.

    Args:
        cursor: Selected index
        total_items: Number of options in the list
        max_visible: Window height

    Returns:
        Tuple of (start_idx, end_idx)
    """
    start = max(0, cursor - OPTION_ANCHOR_OFFSET)
    end = min(start + max_visible, total_items)
    return start, end
