"""Custom exceptions for kanban.

This module defines a hierarchy of exceptions for different error types:
- KanbanError: Base exception for all kanban errors
- InputClosedError: The input channel ran out of events mid-prompt
- NoTasksAvailableError: Task selection found nothing to offer
- ConfigurationError: Configuration related errors
"""


class KanbanError(Exception):
    """Base exception for all kanban errors.

    All kanban-specific exceptions inherit from this class, allowing
    callers to catch all kanban errors with a single except clause.
    """

    pass


class InputClosedError(KanbanError):
    """Input stream reached end-of-file while a prompt was waiting.

    Raised by stream channels so a piped driver that closes stdin early
    fails the prompt instead of spinning forever.
    """

    pass


class NoTasksAvailableError(KanbanError):
    """No task reported itself as available for selection."""

    pass


class ConfigurationError(KanbanError):
    """Configuration related errors.

    Raised when configuration is invalid or missing, such as:
    - Unparseable editor command
    - Unknown setting names
    """

    pass
