"""Base protocol for prompt UI."""

from pathlib import Path
from typing import Any, Literal, Optional, Protocol, Sequence, Union

from kanban.core.options import OptionLike


class MenuUI(Protocol):
    """Protocol for prompt implementations.

    Workflow tasks depend on this instead of a concrete engine, so tests
    can pass a scripted stand-in.
    """

    def ask(self, question: str = "", options: Optional[Sequence[OptionLike]] = None) -> Any:
        """Ask a question; return the chosen option value or the typed line."""
        ...

    def confirm(self, message: str) -> bool:
        """Show a Yes/No prompt, return True for yes."""
        ...

    def ask_file_input(
        self, question: str, file_path: Union[str, Path], content: str
    ) -> Union[str, Literal[False]]:
        """Let the user edit a template file, return its content or False."""
        ...
