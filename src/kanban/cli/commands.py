"""CLI command handlers."""

import sys
from contextlib import contextmanager

import typer

from kanban.utils.config import Config, ConfigCache, get_kanban_dir
from kanban.utils.debug import DebugLog
from kanban.utils.exceptions import KanbanError


def _unescape(question: str) -> str:
    """Turn literal \\n sequences from the shell into line breaks."""
    return question.replace("\\n", "\n")


@contextmanager
def _handle_errors(cache: ConfigCache):
    """Map kanban errors and Ctrl+C to exit codes."""
    from kanban.cli.ui import console

    try:
        yield
    except KeyboardInterrupt:
        console.print()
        raise typer.Exit(130)
    except KanbanError as e:
        DebugLog(cache).debug("cli", "Command failed", error=e)
        console.print(f"\n[red]{e}[/red]")
        raise typer.Exit(1)


def cmd_menu():
    """Show the task menu and run the chosen task."""
    from kanban.cli.ui.interactive import interactive_menu
    from kanban.cli.ui.menu import PromptMenu

    cache = ConfigCache()
    with _handle_errors(cache):
        interactive_menu(PromptMenu(config_cache=cache))


def cmd_ask(question: str, options: list[str]):
    """Ask a question and print the answer on its own line."""
    from kanban.cli.ui.menu import PromptMenu

    cache = ConfigCache()
    with _handle_errors(cache):
        answer = PromptMenu(config_cache=cache).ask(_unescape(question), options)
    sys.stdout.write(f"\n{answer}\n")


def cmd_edit(question: str, file: str, content: str):
    """Run the file input flow; exit code 1 when aborted."""
    from kanban.cli.ui.menu import PromptMenu

    cache = ConfigCache()
    with _handle_errors(cache):
        result = PromptMenu(config_cache=cache).ask_file_input(
            _unescape(question), file, _unescape(content)
        )
    if result is False:
        raise typer.Exit(1)
    sys.stdout.write(f"\n{result}")


def cmd_status():
    """Show current configuration."""
    from kanban.cli.ui import console

    kanban_dir = get_kanban_dir()
    config = Config(kanban_dir)

    console.print(f"[bold]Config:[/bold] [dim]{kanban_dir}[/dim]")
    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Editor:[/bold] [cyan]{config.editor}[/cyan]")


def cmd_debug(state: str):
    """Turn debug logging on or off."""
    from kanban.cli.ui import console

    if state not in ("on", "off"):
        console.print(f"[red]Expected 'on' or 'off', got '{state}'[/red]")
        raise typer.Exit(2)

    config = Config(get_kanban_dir())
    config.set_debug(state == "on")
    console.print(f"Debug {state}")
