"""Interactive tmux session picker.

Entry point that runs the session picker, or with --new the directory picker
that opens or creates a session.
"""

import logging
import sys

from .config import get_config_manager

logger = logging.getLogger(__name__)


def _setup_logging(config) -> None:
    """Log to the configured file; the terminal belongs to the UI."""
    options = {
        "level": getattr(logging, config.log_level, logging.WARNING),
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "datefmt": "%H:%M:%S",
    }
    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        options["filename"] = str(config.log_file)
    else:
        options["handlers"] = [logging.NullHandler()]
    logging.basicConfig(**options)


def main():
    """Run the picker selected by command line arguments.

    Checks for --new flag to determine mode:
    - With --new: Pick a directory to open or create a session in
    - Without --new: Pick a running session, tab or pane
    """
    config = get_config_manager()
    _setup_logging(config)
    logger.debug(f"Config file: {config.config_file}")

    from .ui import SmartSessionsApp

    mode = "new" if "--new" in sys.argv else "sessions"
    app = SmartSessionsApp(config, mode=mode)
    app.run()

    # Outside tmux the chosen target is attached once the UI released the terminal
    app.host.attach_pending()


if __name__ == "__main__":
    main()
