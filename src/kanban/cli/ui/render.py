"""Compose full-screen frames for the prompts."""

from kanban.core.state import PromptState, TextPromptState
from kanban.utils.constants import (
    CLEAR_SCREEN,
    FILTER_PLACEHOLDER,
    SCROLL_HINT,
    SELECTED_MARKER,
    UNSELECTED_MARKER,
)


def format_scroll_hint(state: PromptState) -> str:
    """Rule plus last question line, shown when the question overflows."""
    if not state.viewport.scrollbar:
        return ""
    rule = "-" * (state.viewport.columns // 2)
    return f"\n{rule}\n{state.question_lines[-1]} {SCROLL_HINT}"


def format_filter_hint(state: PromptState) -> str:
    if state.filter_text:
        return f' [Searching for: "{state.filter_text}"]'
    return FILTER_PLACEHOLDER


def format_option_rows(state: PromptState) -> list[str]:
    rows = []
    for index, option in state.visible_options():
        marker = SELECTED_MARKER if index == state.selected_index else UNSELECTED_MARKER
        rows.append(f"{marker}{option.name}")
    return rows


def render_frame(state: PromptState) -> str:
    """Render an option prompt.

    Layout: clear screen, visible question lines, optional scroll hint,
    filter hint, then the option window.
    """
    question = "\n".join(state.visible_question())
    options = "\n".join(format_option_rows(state))
    return (
        f"{CLEAR_SCREEN}{question}{format_scroll_hint(state)}"
        f"{format_filter_hint(state)}\n{options}\n"
    )


def render_text_frame(state: TextPromptState) -> str:
    """Render a free-text prompt: question, one space, then the typed line."""
    question = state.question if state.question.endswith(" ") else state.question + " "
    return f"{CLEAR_SCREEN}{question}{state.line.text}"
