"""CLI entry point for kanban.

Uses Typer for command routing with lazy loading for performance.
"""

from typing import List, Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="kanban",
    help="Interactive prompts for branch and issue workflows",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch interactive menu if no command given."""
    if ctx.invoked_subcommand is None:
        from kanban.cli.commands import cmd_menu

        cmd_menu()


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to show. Use \\n for line breaks."),
    option: Optional[List[str]] = typer.Option(
        None,
        "--option",
        "-o",
        help="Selectable option (repeat for more). Omit for free-text input.",
    ),
) -> None:
    """Ask a question and print the answer."""
    from kanban.cli.commands import cmd_ask

    cmd_ask(question, option or [])


@app.command()
def edit(
    question: str = typer.Argument(..., help="Question to show above the menu."),
    file: str = typer.Argument(..., help="Template file to create and edit."),
    content: str = typer.Option("", "--content", "-c", help="Template content."),
) -> None:
    """Edit a template file as the answer and print its final content."""
    from kanban.cli.commands import cmd_edit

    cmd_edit(question, file, content)


@app.command()
def status() -> None:
    """Show current configuration."""
    from kanban.cli.commands import cmd_status

    cmd_status()


@app.command()
def debug(
    state: str = typer.Argument(..., help="on or off"),
) -> None:
    """Turn debug logging on or off."""
    from kanban.cli.commands import cmd_debug

    cmd_debug(state)
