"""Keypress-driven prompt engine."""

import sys
from pathlib import Path
from typing import IO, Any, Literal, Optional, Sequence, Union

from rich.console import Console

from kanban.cli.ui.channels import InputChannel, open_channel
from kanban.cli.ui.panels import (
    console as default_console,
    get_terminal_size,
    hide_cursor,
    show_cursor,
    write_frame,
)
from kanban.cli.ui.render import render_frame, render_text_frame
from kanban.core.options import OptionLike, normalize_options
from kanban.core.state import PromptState, TextPromptState
from kanban.utils.config import ConfigCache
from kanban.utils.debug import DebugLog


class PromptMenu:
    """Full-screen prompt with a filterable option list or free-text input.

    Each ``ask`` call owns a fresh state machine; nothing carries over between
    calls except the channel and config cache handed to the constructor.
    """

    def __init__(
        self,
        channel: Optional[InputChannel] = None,
        console: Optional[Console] = None,
        config_cache: Optional[ConfigCache] = None,
        stdin: Optional[IO[str]] = None,
    ):
        self.config_cache = config_cache if config_cache is not None else ConfigCache()
        self.log = DebugLog(self.config_cache)
        self.console = console if console is not None else default_console
        if channel is None:
            channel = open_channel(stdin if stdin is not None else sys.stdin, log=self.log)
        self.channel = channel

    def _draw(self, frame: str):
        write_frame(frame, self.console)

    def ask(self, question: str = "", options: Optional[Sequence[OptionLike]] = None) -> Any:
        """Ask a question.

        Args:
            question: Question text, may span several lines
            options: Strings, (name, value) pairs, {"name", "value"} mappings
                or Option records. Falsy entries are dropped.

        Returns:
            Value of the chosen option, or the typed line when there are
            no options.
        """
        choices = normalize_options(options)
        if not choices:
            return self._ask_text(question)

        width, height = get_terminal_size(self.console)
        state = PromptState(question, choices, rows=height, columns=width)
        self.log.debug_prompt(
            "Ask",
            options=len(choices),
            rows=height,
            question_rows=state.viewport.question_rows,
        )

        hide_cursor(self.console)
        try:
            self._draw(render_frame(state))
            while not state.handle(self.channel.read_event()):
                self._draw(render_frame(state))
        finally:
            show_cursor(self.console)

        self.log.debug_prompt("Selected", name=state.selected.name)
        return state.value

    def _ask_text(self, question: str) -> str:
        state = TextPromptState(question)
        self.log.debug_prompt("Ask text")
        self._draw(render_text_frame(state))
        while not state.handle(self.channel.read_event()):
            self._draw(render_text_frame(state))
        # Finish the input line like a terminal echoing the return key
        self._draw("\n")
        return state.value

    def confirm(self, message: str) -> bool:
        """Show a Yes/No prompt, return True for yes."""
        return self.ask(message, ["Yes", "No"]) == "Yes"

    def ask_file_input(
        self, question: str, file_path: Union[str, Path], content: str
    ) -> Union[str, Literal[False]]:
        """Let the user edit a template file as the answer."""
        from kanban.cli.ui.file_input import ask_file_input

        return ask_file_input(question, file_path, content, menu=self)


def ask(question: str = "", options: Optional[Sequence[OptionLike]] = None, **kwargs) -> Any:
    """Ask a question with a one-off PromptMenu."""
    return PromptMenu(**kwargs).ask(question, options)


def ask_file_input(
    question: str, file_path: Union[str, Path], content: str, **kwargs
) -> Union[str, Literal[False]]:
    """Run the file input flow with a one-off PromptMenu."""
    return PromptMenu(**kwargs).ask_file_input(question, file_path, content)
