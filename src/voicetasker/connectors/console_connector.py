# src/voicetasker/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.chat import stream_reply
from ..core.state import AppState
from ..llm.client import friendly_llm_error_message

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    If stdout is not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type your messages. Use /help for commands. Use /exit to quit.\n")

    app_name = str(getattr(state.settings, "app_name", "VoiceTasker"))

    while True:
        try:
            user_input = input(">>> You: ").strip()
            _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Commands (/help, /tasks, ...)
        try:
            with state.lock:
                cmd_response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            _print_ts(cmd_response)
            continue

        # Normal chat: stream chunks and print them as they arrive.
        assistant_printed = False
        try:
            with state.lock:
                for piece in stream_reply(state, user_input):
                    if not piece:
                        continue
                    if not assistant_printed:
                        print(f"[{_ts_local()}] <<< {app_name}: ", end="", flush=True)
                        assistant_printed = True
                    print(piece, end="", flush=True)
        except RuntimeError as e:
            msg = friendly_llm_error_message(e)
            logger.info("LLM runtime error: %s", msg)
            _print_ts(f"[LLM] {msg}")
            continue
        except Exception:
            logger.exception("Console chat handler crashed.")
            _print_ts("Internal error while generating a reply.")
            continue

        if not assistant_printed:
            _print_ts("[LLM] No output (model produced no content).")
            continue

        print("\n")

    logger.info("Console connector finished.")
