"""Filesystem locations for smart-sessions.

PUBLIC API:
  - CONFIG_FILENAME: Per-project config file name
  - USER_CONFIG_PATH: Fallback config location
  - CACHE_PATH: Default candidate cache location
"""

from pathlib import Path

CONFIG_FILENAME = "smart-sessions.toml"
USER_CONFIG_PATH = Path.home() / ".config" / "smart-sessions" / "config.toml"
CACHE_PATH = Path.home() / ".cache" / "smart-sessions" / "store"
