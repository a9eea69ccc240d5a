"""Discovery of session candidates through an external command.

PUBLIC API:
  - run_discovery: Execute the discovery argv and return raw stdout
  - decode_candidates: Turn raw discovery output into a candidate list
"""

import logging
import os
import subprocess

from .errors import DiscoveryOutputError

__all__ = ["run_discovery", "decode_candidates"]

logger = logging.getLogger(__name__)


def run_discovery(argv: list[str], timeout: float = 30.0) -> bytes:
    """Run discovery command, return stdout bytes.

    Arguments get "~" expanded since no shell is involved.

    Args:
        argv: Command and arguments.
        timeout: Seconds before the command is abandoned.

    Returns:
        Raw stdout, empty on failure.
    """
    if not argv:
        return b""

    argv = [os.path.expanduser(arg) for arg in argv]
    try:
        result = subprocess.run(argv, capture_output=True, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Discovery command {argv[0]} failed: {e}")
        return b""

    if result.returncode != 0:
        # find exits non-zero on permission errors but still lists what it can
        logger.info(f"Discovery command {argv[0]} exited with {result.returncode}")

    return result.stdout


def decode_candidates(raw: bytes) -> list[str]:
    """Decode UTF-8 output and split it into non-empty lines.

    Raises:
        DiscoveryOutputError: If raw is not valid UTF-8.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DiscoveryOutputError(f"Discovery output is not UTF-8: {e}") from e

    return [line for line in text.split("\n") if line]
