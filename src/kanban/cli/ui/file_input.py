"""Answer a question by editing a template file in an external editor."""

import shlex
import subprocess
from pathlib import Path
from typing import Literal, Optional, Union

from kanban.cli.ui.menu import PromptMenu
from kanban.core.options import Option
from kanban.utils.constants import UNMODIFIED_TEMPLATE_PROMPT, FileAction
from kanban.utils.debug import DebugLog
from kanban.utils.exceptions import ConfigurationError
from kanban.utils.shutdown import ShutdownHook


class ScratchFile:
    """Template file that exists only for the duration of a with-block.

    On entry the default content is written and a shutdown hook is
    registered, so the file is also removed on interpreter exit or on
    SIGINT/SIGTERM/SIGQUIT. Leaving the block runs the hook, which removes
    the file and deregisters itself.
    """

    def __init__(self, path: Path, content: str, log: Optional[DebugLog] = None):
        self.path = path
        self.content = content
        self.log = log
        self._hook = ShutdownHook(self.remove)

    def __enter__(self) -> "ScratchFile":
        self.write()
        try:
            self._hook.register()
        except ValueError:
            self.remove()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    def exists(self) -> bool:
        return self.path.exists()

    def write(self, content: Optional[str] = None):
        """Write content (default: the template) without newline translation."""
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(self.content if content is None else content)

    def read(self) -> str:
        with open(self.path, encoding="utf-8", newline="") as f:
            return f.read()

    def remove(self):
        """Delete the file if it is still there."""
        if self.path.exists():
            self.path.unlink()
            if self.log:
                self.log.debug_file("Removed scratch file", path=self.path)

    def cleanup(self):
        """Remove the file once; later calls are no-ops."""
        self._hook.fire()


def open_editor(editor: str, path: Path) -> subprocess.CompletedProcess:
    """Run the editor on a file and wait for it to exit.

    Raises:
        ConfigurationError: If the editor setting is empty
        FileNotFoundError: If the editor executable does not exist
        subprocess.CalledProcessError: If the editor exits non-zero
    """
    command = shlex.split(editor)
    if not command:
        raise ConfigurationError("No editor configured")
    return subprocess.run([*command, str(path)], check=True)


def ask_file_input(
    question: str,
    file_path: Union[str, Path],
    content: str,
    *,
    menu: Optional[PromptMenu] = None,
) -> Union[str, Literal[False]]:
    """Ask the user to edit a template file as their answer.

    Shows a menu to open the file in the configured editor, continue or
    abort. Continuing with an untouched template needs an explicit "Yes".

    Args:
        question: Question shown above the menu
        file_path: Where the template is written
        content: Template content

    Returns:
        Final file content, or False if the user aborted.
    """
    menu = menu or PromptMenu()
    path = Path(file_path)
    editor = menu.config_cache.get().editor
    notice = ""

    with ScratchFile(path, content, log=menu.log) as scratch:
        menu.log.debug_file("Template written", path=path)
        while True:
            prompt = f"{question}\n{notice}" if notice else question
            notice = ""
            action = menu.ask(
                prompt,
                [
                    Option(f"Edit template with `{editor} {path}`", FileAction.OPEN_EDITOR),
                    Option("Continue", FileAction.CONTINUE),
                    Option("Abort", FileAction.ABORT),
                ],
            )

            if action == FileAction.OPEN_EDITOR:
                menu.log.debug_file("Opening editor", editor=editor, path=path)
                try:
                    open_editor(editor, path)
                except (
                    ConfigurationError,
                    FileNotFoundError,
                    subprocess.CalledProcessError,
                ) as e:
                    menu.log.log_error("file", f"Editor failed: {editor}", e)
                    notice = f"Could not run `{editor}`: {e}"
                continue

            if action == FileAction.ABORT:
                menu.log.debug_file("Aborted", path=path)
                return False

            if not scratch.exists():
                scratch.write()
                result = content
            else:
                result = scratch.read()

            if result != content or menu.confirm(UNMODIFIED_TEMPLATE_PROMPT):
                menu.log.debug_file("Accepted", path=path, modified=result != content)
                return result
