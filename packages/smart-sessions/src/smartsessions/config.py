"""Configuration management for smart-sessions.

Settings come from the [default] table of smart-sessions.toml, found in the
current or a parent directory, else from ~/.config/smart-sessions/config.toml.
"""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from .paths import CACHE_PATH, CONFIG_FILENAME, USER_CONFIG_PATH

logger = logging.getLogger(__name__)

DEFAULT_DISCOVERY_COMMAND = "find ~ -mindepth 1 -maxdepth 2 -type d -not -path '*/.*'"
DEFAULT_HEIGHT = 20
DEFAULT_REFRESH_INTERVAL = 2.0


def _find_config_file() -> Optional[Path]:
    """Find smart-sessions.toml in current or parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    if USER_CONFIG_PATH.exists():
        return USER_CONFIG_PATH

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.warning(f"Ignoring invalid config {path}: {e}")
        return {}


class ConfigManager:
    """Manages configuration for smart-sessions.

    Args:
        path: Explicit config file; discovered when None.
    """

    def __init__(self, path: Optional[Path] = None):
        self._config_file = path or _find_config_file()
        self.data = _load_config(self._config_file)
        self._default_config = self.data.get("default", {})

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    @property
    def discovery_command(self) -> str:
        """Command whose output lines become candidates."""
        return self._default_config.get("discovery_command", DEFAULT_DISCOVERY_COMMAND)

    @property
    def cache_path(self) -> Path:
        """Where the last discovered candidate list is kept."""
        value = self._default_config.get("cache_path")
        return Path(value).expanduser() if value else CACHE_PATH

    @property
    def height(self) -> int:
        """Rows shown by the candidate picker."""
        try:
            return max(1, int(self._default_config.get("height", DEFAULT_HEIGHT)))
        except (TypeError, ValueError):
            return DEFAULT_HEIGHT

    @property
    def refresh_interval(self) -> float:
        """Seconds between tmux snapshot refreshes."""
        try:
            return max(0.0, float(self._default_config.get("refresh_interval", DEFAULT_REFRESH_INTERVAL)))
        except (TypeError, ValueError):
            return DEFAULT_REFRESH_INTERVAL

    @property
    def log_file(self) -> Optional[Path]:
        value = self._default_config.get("log_file")
        return Path(value).expanduser() if value else None

    @property
    def log_level(self) -> str:
        return str(self._default_config.get("log_level", "WARNING")).upper()


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
