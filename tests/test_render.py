"""Tests for frame rendering."""

from kanban.cli.ui.render import render_frame, render_text_frame
from kanban.core.events import InputEvent
from kanban.core.options import normalize_options
from kanban.core.state import PromptState, TextPromptState
from kanban.utils.constants import CLEAR_SCREEN


def make_state(options, question="Continue?", rows=24, columns=80):
    return PromptState(question, normalize_options(options), rows=rows, columns=columns)


def test_frame_layout():
    state = make_state(["Yes", "No"])

    assert render_frame(state) == (
        CLEAR_SCREEN + "Continue? [Start typing to filter...]\n► Yes\n  No\n"
    )


def test_frame_marks_selected_row():
    state = make_state(["Yes", "No"])
    state.handle(InputEvent.key("down"))

    frame = render_frame(state)

    assert "  Yes\n► No\n" in frame


def test_frame_shows_active_filter():
    state = make_state(["Apple", "Banana", "Grape"], question="Fruit?")
    state.handle(InputEvent.set_line("Ap"))

    frame = render_frame(state)

    assert 'Fruit? [Searching for: "Ap"]\n' in frame
    assert frame.endswith("► Apple\n  Grape\n")


def test_option_window_shows_eight_rows():
    state = make_state([f"Issue {i}" for i in range(20)])
    for _ in range(10):
        state.handle(InputEvent.key("down"))

    rows = render_frame(state).split("\n", 1)[1].rstrip("\n").split("\n")

    assert len(rows) == 8
    assert rows[0] == "  Issue 6"
    assert rows[4] == "► Issue 10"


def test_scroll_hint_for_long_question():
    question = "\n".join(f"line {i}" for i in range(10)) + "\nProceed?"
    state = make_state(["Yes", "No"], question=question, rows=10, columns=40)

    frame = render_frame(state)

    assert "line 0\nline 1\nline 2\nline 3\n" in frame
    assert "line 4" not in frame
    assert "\n" + "-" * 20 + "\nProceed? [Use ▲/▼ to see more] [Start typing" in frame


def test_no_scroll_hint_for_short_question():
    frame = render_frame(make_state(["Yes", "No"]))

    assert "▲/▼" not in frame


def test_text_frame_adds_space_after_question():
    state = TextPromptState("Title?")
    state.handle(InputEvent.char("x"))

    assert render_text_frame(state) == CLEAR_SCREEN + "Title? x"


def test_text_frame_keeps_existing_space():
    assert render_text_frame(TextPromptState("Title: ")) == CLEAR_SCREEN + "Title: "
