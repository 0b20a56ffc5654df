"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_kanban_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/kanban directory."""
    kanban_dir = temp_dir / ".kanban"
    kanban_dir.mkdir()
    monkeypatch.setenv("KANBAN_DIR", str(kanban_dir))
    monkeypatch.delenv("KANBAN_DEBUG", raising=False)
    monkeypatch.delenv("KANBAN_EDITOR", raising=False)
    return kanban_dir
