"""Terminal output helpers shared by the prompts."""

from typing import Optional

from rich.console import Console

console = Console()

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


def _console(target: Optional[Console]) -> Console:
    return target if target is not None else console


def write_frame(frame: str, target: Optional[Console] = None) -> None:
    """Write a composed frame verbatim and flush.

    Frames carry their own clear-screen escape, so they bypass Rich
    rendering (which drops control codes when not writing to a terminal).
    """
    out = _console(target)
    print(frame, end="", file=out.file, flush=True)


def hide_cursor(target: Optional[Console] = None) -> None:
    """Hide the cursor while a prompt is active (terminals only)."""
    out = _console(target)
    if out.is_terminal:
        print(HIDE_CURSOR, end="", file=out.file, flush=True)


def show_cursor(target: Optional[Console] = None) -> None:
    """Show the cursor again (terminals only)."""
    out = _console(target)
    if out.is_terminal:
        print(SHOW_CURSOR, end="", file=out.file, flush=True)


def get_terminal_size(target: Optional[Console] = None) -> tuple[int, int]:
    """Get terminal width and height."""
    out = _console(target)
    return out.size.width, out.size.height
