"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional


def get_kanban_dir() -> Path:
    """Get the kanban data directory (XDG-compliant)."""
    if env_dir := os.environ.get("KANBAN_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "kanban"


class Config:
    """Application configuration."""

    def __init__(self, kanban_dir: Optional[Path] = None):
        """Load config from directory."""
        self.kanban_dir = kanban_dir or get_kanban_dir()
        self._config_file = self.kanban_dir / "config.json"
        self._load()

    @property
    def config_file(self) -> Path:
        """Path to config.json."""
        return self._config_file

    def _load(self):
        """Load config from file."""
        self.debug = False
        # Editor used by file input prompts
        self.editor = os.environ.get("EDITOR", "vim")
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.editor = data.get("editor", os.environ.get("EDITOR", "vim"))
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell KANBAN_* vars."""
        prefix = "KANBAN_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both KANBAN_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name in ("dir", "env") or not hasattr(self, attr_name):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        # Shell env vars have the highest priority
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file with owner-only permissions."""
        self.kanban_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "editor": self.editor,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))
        self._config_file.chmod(0o600)

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    @property
    def debug_log_path(self) -> Path:
        """Path to the debug log file."""
        return self.kanban_dir / "debug.log"


class ConfigCache:
    """Lazily loaded Config owned by whoever needs it.

    The cached Config is reloaded on the next ``get()`` after either:
    - ``invalidate()`` is called, or
    - the modification time of config.json differs from the one seen at load.

    Nothing is shared between caches; two prompts holding different caches
    never observe each other's reloads.
    """

    def __init__(self, kanban_dir: Optional[Path] = None):
        self.kanban_dir = kanban_dir
        self._config: Optional[Config] = None
        self._mtime: Optional[float] = None

    def _current_mtime(self, config: Config) -> Optional[float]:
        try:
            return config.config_file.stat().st_mtime
        except FileNotFoundError:
            return None

    def get(self) -> Config:
        """Return the cached Config, reloading it if stale."""
        if self._config is not None:
            if self._current_mtime(self._config) == self._mtime:
                return self._config
        config = Config(self.kanban_dir)
        self._config = config
        self._mtime = self._current_mtime(config)
        return config

    def invalidate(self):
        """Drop the cached Config; the next get() reloads it."""
        self._config = None
        self._mtime = None
