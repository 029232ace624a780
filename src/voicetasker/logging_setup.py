# src/voicetasker/logging_setup.py

"""
Logging for the console app.

The REPL shares stderr with the conversation, so the console only shows what
helps while chatting: our own records (action executed, directive rejected,
LLM fallbacks) and errors from anything else. The log file under data_dir
keeps everything at DEBUG, including rejected directive payloads.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER = "voicetasker"
LOG_FILE_NAME = "voicetasker.log"

# SDK/transport loggers that chat per request at INFO.
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "openai")

_FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppOnlyConsoleFilter(logging.Filter):
    """Pass every voicetasker.* record; anything else only at ERROR and above."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    handler.addFilter(AppOnlyConsoleFilter())
    return handler


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/voicetasker",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> Path:
    """
    Install the console + file handlers on the root logger and return the log file path.

    Replaces any handlers already on the root logger, so calling it twice
    doesn't duplicate output. Called once from cli.main before anything logs.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(console_level))
    root.addHandler(_file_handler(log_file, file_level))

    # warnings.warn(...) -> 'py.warnings', which the console filter treats as third-party.
    logging.captureWarnings(True)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
