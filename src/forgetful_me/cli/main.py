# src/forgetful_me/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console loop in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import TaskStoreError

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(log_file=settings.log_path, console_level=console_level)
    except OSError as e:
        # Still usable without the log file.
        setup_logging(console_level=console_level)
        logger.warning("Log file %s unavailable: %s", settings.log_path, e)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
        run_console_loop(state)
    except TaskStoreError as e:
        logger.error("Fatal task file error: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logger.error("Fatal I/O error: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
