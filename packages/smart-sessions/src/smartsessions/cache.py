"""Persisted candidate list.

PUBLIC API:
  - CandidateCache: Read/write the newline-joined candidate list
"""

import logging
import tempfile
from pathlib import Path

from .errors import CacheError

__all__ = ["CandidateCache"]

logger = logging.getLogger(__name__)


class CandidateCache:
    """Newline-joined candidate list at a fixed path.

    Args:
        path: Cache file location.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def read(self) -> list[str]:
        """Read the cached candidates.

        Raises:
            CacheError: If the file is missing or unreadable.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CacheError(f"Cannot read cache {self.path}: {e}") from e

        return [line for line in text.split("\n") if line]

    def write(self, candidates: list[str]) -> None:
        """Replace the cache contents atomically.

        Raises:
            CacheError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent, delete=False, suffix=".tmp"
            ) as f:
                f.write("\n".join(candidates))
                tmp_path = Path(f.name)
            tmp_path.replace(self.path)
        except OSError as e:
            raise CacheError(f"Cannot write cache {self.path}: {e}") from e

        logger.debug(f"Wrote {len(candidates)} candidates to {self.path}")
