# src/voicetasker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    signal.signal(signal.SIGTERM, _handle_signal)
    if not settings.console_enabled:
        # The console loop handles Ctrl+C itself via KeyboardInterrupt.
        signal.signal(signal.SIGINT, _handle_signal)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled. Nothing to run interactively. Press Ctrl+C to stop.")
            stop_main.wait()
    finally:
        logger.info("Tasks in memory at exit: %d (not persisted).", state.task_store.count_tasks())
        logger.info("Bye.")


if __name__ == "__main__":
    main()
