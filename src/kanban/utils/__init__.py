"""Utilities for kanban."""

from kanban.utils.config import Config, ConfigCache, get_kanban_dir
from kanban.utils.debug import DebugLog

__all__ = ["Config", "ConfigCache", "DebugLog", "get_kanban_dir"]
