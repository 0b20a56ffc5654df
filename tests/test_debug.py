"""Tests for debug logging."""

import json

from kanban.utils.config import ConfigCache
from kanban.utils.debug import DebugLog


def enable_debug(kanban_dir):
    (kanban_dir / "config.json").write_text(json.dumps({"debug": True}))


def test_debug_silent_when_disabled(mock_kanban_dir, capsys):
    log = DebugLog(ConfigCache(mock_kanban_dir))

    log.debug_prompt("Ask", options=2)

    assert not (mock_kanban_dir / "debug.log").exists()
    assert capsys.readouterr().err == ""


def test_debug_writes_file_and_stderr(mock_kanban_dir, capsys):
    enable_debug(mock_kanban_dir)
    log = DebugLog(ConfigCache(mock_kanban_dir))

    log.debug_prompt("Ask", options=2)

    line = (mock_kanban_dir / "debug.log").read_text().strip()
    assert line.startswith("[kanban:prompt] ")
    assert line.endswith("Ask | options=2")
    assert "[kanban:prompt]" in capsys.readouterr().err


def test_debug_categories(mock_kanban_dir):
    enable_debug(mock_kanban_dir)
    log = DebugLog(ConfigCache(mock_kanban_dir))

    log.debug_command("Ignored command")
    log.debug_file("Removed scratch file")

    text = (mock_kanban_dir / "debug.log").read_text()
    assert "[kanban:command]" in text
    assert "[kanban:file]" in text


def test_log_error_always_logs(mock_kanban_dir, capsys):
    log = DebugLog(ConfigCache(mock_kanban_dir))

    try:
        raise FileNotFoundError("fake-editor")
    except FileNotFoundError as e:
        log.log_error("file", "Editor failed", e)

    text = (mock_kanban_dir / "debug.log").read_text()
    assert "[kanban:file]" in text
    assert "ERROR: Editor failed" in text
    assert "FileNotFoundError" in text
    assert "ERROR: Editor failed" in capsys.readouterr().err


def test_debug_follows_config_changes(mock_kanban_dir):
    cache = ConfigCache(mock_kanban_dir)
    log = DebugLog(cache)
    log.debug_prompt("before")

    enable_debug(mock_kanban_dir)
    cache.invalidate()
    log.debug_prompt("after")

    text = (mock_kanban_dir / "debug.log").read_text()
    assert "before" not in text
    assert "after" in text
