"""Debug logging utility."""

import sys
import traceback
from datetime import datetime
from typing import Optional

from kanban.utils.config import ConfigCache


class DebugLog:
    """Debug logger bound to an explicitly owned config cache.

    Debug lines are only written when the cached config has ``debug`` on.
    Errors are always written.
    """

    def __init__(self, cache: Optional[ConfigCache] = None):
        self.cache = cache or ConfigCache()

    def _log_to_file(self, line: str):
        """Append line to debug log file."""
        try:
            config = self.cache.get()
            config.kanban_dir.mkdir(parents=True, exist_ok=True)
            with open(config.debug_log_path, "a") as f:
                f.write(line + "\n")
        except OSError:
            pass

    def _echo(self, line: str):
        try:
            print(line, file=sys.stderr)
        except BrokenPipeError:
            pass  # Parent process closed stderr, continue silently

    def debug(self, category: str, message: str, **kwargs):
        """Log debug message if debug mode is enabled.

        Args:
            category: Category like 'prompt', 'command', 'file'
            message: Debug message
            **kwargs: Additional key=value pairs to log
        """
        if not self.cache.get().debug:
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
        line = f"[kanban:{category}] {timestamp} {message}"
        if extras:
            line += f" | {extras}"

        self._log_to_file(line)
        self._echo(line)

    def debug_prompt(self, message: str, **kwargs):
        """Log prompt-related debug message."""
        self.debug("prompt", message, **kwargs)

    def debug_command(self, message: str, **kwargs):
        """Log automation-command debug message."""
        self.debug("command", message, **kwargs)

    def debug_file(self, message: str, **kwargs):
        """Log file-input debug message."""
        self.debug("file", message, **kwargs)

    def log_error(self, category: str, message: str, exc: Optional[Exception] = None):
        """Log error message ALWAYS (even if debug mode is off).

        Args:
            category: Category like 'file', 'cli'
            message: Error message
            exc: Optional exception to include traceback
        """
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        line = f"[kanban:{category}] {timestamp} ERROR: {message}"

        if exc:
            tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
            line += "\n" + "".join(tb)

        self._log_to_file(line)
        self._echo(line)
