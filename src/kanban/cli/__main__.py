"""Allow running as ``python -m kanban.cli``."""

from kanban.cli import app

app()
